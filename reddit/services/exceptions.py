class APIException(Exception):
    def __init__(self, message, status_code=None, response=None):
        # Call the base class constructor with the parameters it needs
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class InvalidTokenException(APIException):
    pass


class NotFoundException(APIException):
    def __init__(self, message, response=None):
        super().__init__(message, status_code=404, response=response)


class ServiceUnavailableException(APIException):
    def __init__(self, message, response=None):
        super().__init__(message, status_code=503, response=response)


class ModelAttributeError(AttributeError):
    pass
