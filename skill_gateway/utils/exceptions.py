class SkillGatewayError(Exception):
    """Base exception for the skill gateway."""


class ClientError(SkillGatewayError):
    """A request rejected before it reaches the skill.

    ``status_code`` is the HTTP status reported back to the caller and the
    message is used as the response detail.
    """

    status_code: int = 400

    def __init__(self, detail: str = "", status_code: int | None = None):
        if status_code is not None:
            self.status_code = status_code
        self.detail = detail
        super().__init__(detail)


class NotAcceptableError(ClientError):
    status_code = 406

    def __init__(self, detail: str = "Not Acceptable"):
        super().__init__(detail)


class MethodNotAllowedError(ClientError):
    status_code = 405

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Method not allowed: {method}")


class MissingSignatureError(ClientError):
    pass


class InvalidSignatureError(ClientError):
    def __init__(self, detail: str = "Invalid signature"):
        super().__init__(detail)


class MalformedRequestError(ClientError):
    pass


class SkillHandlerError(SkillGatewayError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class SkillLoadError(SkillGatewayError):
    def __init__(self, target: str, detail: str):
        self.target = target
        super().__init__(f"Failed to load skill '{target}': {detail}")
