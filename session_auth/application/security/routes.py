from types import MappingProxyType
import typing as t

SERVICE_VERSION = "/v1"
USER_ROUTE = f"{SERVICE_VERSION}/user"
AUTH_SESSION_ROUTE = f"{SERVICE_VERSION}/auth/session"
HEALTH_ROUTE = "/health"

#Publicly accessible without a session: path -> {method: bypass}
PUBLIC_ROUTES: t.Mapping[str, t.Mapping[str, bool]] = {
    USER_ROUTE: {"POST": True},           #Create user
    AUTH_SESSION_ROUTE: {"POST": True},   #Create session (login)
    HEALTH_ROUTE: {"GET": True},
}


class RouteClassifier:
    """Tells whether a (path, method) pair skips authentication.

    Exact path matches only. A path missing from the table requires authentication;
    whether the route exists at all is the router's business.
    """

    def __init__(self, routes: t.Mapping[str, t.Mapping[str, bool]] = PUBLIC_ROUTES):
        self._routes = MappingProxyType({
            path: MappingProxyType({method.upper(): bool(flag) for method, flag in methods.items()})
            for path, methods in routes.items()
        })

    @property
    def routes(self) -> t.Mapping[str, t.Mapping[str, bool]]:
        return self._routes

    def bypasses(self, path: str, method: str) -> bool:
        methods = self._routes.get(path)
        if methods is None:
            return False
        return methods.get(method.upper(), False)
