"""IAM presentation layer.

Organizes presentation concerns by domain aggregate following vertical
slicing. The keys package contains the issuance route and its models.
"""

from iam.presentation.keys.routes import router

__all__ = ["router"]
