"""Domain exceptions for the conversation bounded context.

These exceptions are raised by services and ports and translated into
HTTP responses by the presentation layer.
"""


class SessionNotFoundError(Exception):
    """Raised when a session does not exist or belongs to another tenant.

    The two cases are deliberately indistinguishable so a caller cannot
    probe for the existence of other tenants' sessions.
    """

    pass


class InvalidMessageError(Exception):
    """Raised when a chat message has no usable text.

    Raised before any store access, so no state is mutated.
    """

    pass


class OracleError(Exception):
    """Raised when the conversational model fails at the transport or protocol level.

    An empty reply is not an error; it is replaced with placeholder text.
    When this is raised during a turn, the user message stays persisted
    and no bot message is created.
    """

    pass


class TitleAlreadyAssignedError(Exception):
    """Raised when assigning a title to a session that already has one."""

    pass
