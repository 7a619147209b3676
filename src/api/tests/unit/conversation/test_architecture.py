"""Architecture tests using pytest-archon.

These tests enforce DDD architectural boundaries between layers
within the Conversation bounded context.
"""

from pytest_archon import archrule


class TestConversationDomainLayerBoundaries:
    """Tests that the domain layer has no forbidden dependencies."""

    def test_domain_does_not_import_infrastructure(self):
        """Domain layer should not depend on infrastructure.

        Aggregates and the transcript mapping know nothing about
        SQLAlchemy models or the model client.
        """
        (
            archrule("conversation_domain_no_infrastructure")
            .match("conversation.domain*")
            .should_not_import("conversation.infrastructure*", "infrastructure*")
            .check("conversation")
        )

    def test_domain_does_not_import_application(self):
        (
            archrule("conversation_domain_no_application")
            .match("conversation.domain*")
            .should_not_import("conversation.application*")
            .check("conversation")
        )

    def test_domain_does_not_import_frameworks(self):
        (
            archrule("conversation_domain_no_frameworks")
            .match("conversation.domain*")
            .should_not_import("fastapi*", "starlette*", "sqlalchemy*", "google*")
            .check("conversation")
        )


class TestConversationPortsLayerBoundaries:
    """Tests that the ports layer has no forbidden dependencies."""

    def test_ports_does_not_import_infrastructure(self):
        (
            archrule("conversation_ports_no_infrastructure")
            .match("conversation.ports*")
            .should_not_import("conversation.infrastructure*")
            .check("conversation")
        )

    def test_ports_does_not_import_application(self):
        (
            archrule("conversation_ports_no_application")
            .match("conversation.ports*")
            .should_not_import("conversation.application*")
            .check("conversation")
        )


class TestConversationApplicationLayerBoundaries:
    """Tests that the application layer has appropriate dependencies."""

    def test_application_does_not_import_infrastructure(self):
        """Services depend on ports, never on the Gemini client or ORM models."""
        (
            archrule("conversation_application_no_infrastructure")
            .match("conversation.application*")
            .should_not_import("conversation.infrastructure*", "google*")
            .check("conversation")
        )

    def test_application_does_not_import_presentation(self):
        (
            archrule("conversation_application_no_presentation")
            .match("conversation.application*")
            .should_not_import("conversation.presentation*", "fastapi*")
            .check("conversation")
        )


class TestConversationInfrastructureLayerBoundaries:
    """Tests that infrastructure has appropriate dependencies."""

    def test_infrastructure_does_not_import_application(self):
        """Infrastructure is used BY the application layer, not vice versa."""
        (
            archrule("conversation_infrastructure_no_application")
            .match("conversation.infrastructure*")
            .should_not_import("conversation.application*")
            .check("conversation")
        )

    def test_infrastructure_does_not_import_presentation(self):
        (
            archrule("conversation_infrastructure_no_presentation")
            .match("conversation.infrastructure*")
            .should_not_import("conversation.presentation*")
            .check("conversation")
        )


class TestConversationContextIsolation:
    """Only the presentation layer may reach into IAM, for authentication."""

    def test_core_layers_do_not_import_iam(self):
        (
            archrule("conversation_core_no_iam")
            .match(
                "conversation.domain*",
                "conversation.ports*",
                "conversation.application*",
                "conversation.infrastructure*",
            )
            .should_not_import("iam*")
            .check("conversation")
        )
