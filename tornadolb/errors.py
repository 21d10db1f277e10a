class LoadBalancerError(Exception):
    pass


class ServiceError(LoadBalancerError):
    # raised for 500 or other error code

    def __init__(self, message, code, body):
        self.code = code
        self.body = body
        super(ServiceError, self).__init__(message)


class DecodeError(LoadBalancerError):
    # the response document did not have the expected shape
    pass


def service_error(response, service):
    if response.code >= 400:
        message = "Service {0} failed with {1}\n{2}".format(
            service, response.code, response.body)
        return ServiceError(message, code=response.code, body=response.body)
    return None


def check_service_response(response, service):
    error = service_error(response, service)
    if error is not None:
        raise error
