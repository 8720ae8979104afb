import flask

from .errors import ConfigurationError, UnauthenticatedError


_identity_key = "graphroute_identity"


def login(identity):
    """
    Record ``identity`` as the authenticated identity of the current request.

    Call this from an authentication hook (for instance a ``before_request``
    function on the app or blueprint that the endpoint is registered on).
    Resolvers read it back through ``RequestContext.identity``.
    """
    setattr(flask.g, _identity_key, identity)


def logout():
    flask.g.pop(_identity_key, None)


class RequestContext(object):
    """
    The context passed to resolvers while executing one request.

    Exposes the database session and the authenticated identity of the
    request. The session is opened from ``session_factory`` the first time
    ``db`` is used, and closed by ``close()``.
    """

    def __init__(self, request, *, session_factory=None):
        self.request = request
        self._session_factory = session_factory
        self._session = None

    @property
    def db(self):
        if self._session is None:
            if self._session_factory is None:
                raise ConfigurationError("no session factory was registered for this endpoint")

            self._session = self._session_factory()

        return self._session

    @property
    def identity(self):
        return flask.g.get(_identity_key)

    def require_identity(self):
        identity = self.identity
        if identity is None:
            raise UnauthenticatedError()
        else:
            return identity

    def close(self):
        if self._session is not None:
            session = self._session
            self._session = None
            session.close()
