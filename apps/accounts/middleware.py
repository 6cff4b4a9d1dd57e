from .session import SessionStore


class SessionProfileMiddleware:
    """
    Attach a SessionStore to every request as request.crm_session

    Must run after AuthenticationMiddleware (needs request.user).
    The profile is resolved before the view runs, so guarded views always
    see a settled session.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.crm_session = SessionStore(request)
        request.crm_session.restore_session()
        return self.get_response(request)
