import pytest
import session_auth.application.security as security


@pytest.fixture
def classifier() -> security.RouteClassifier:
    return security.RouteClassifier()


@pytest.mark.parametrize(
    "path, method, expected",
    [
        ("/v1/user", "POST", True),
        ("/v1/user", "GET", False),
        ("/v1/user", "PUT", False),
        ("/v1/auth/session", "POST", True),
        ("/v1/auth/session", "PUT", False),
        ("/v1/auth/session", "DELETE", False),
        ("/health", "GET", True),
        ("/v1/regatta", "POST", False),
        ("/not/registered", "GET", False),
    ],
)
def test_default_table(classifier, path, method, expected):
    assert classifier.bypasses(path, method) is expected


@pytest.mark.parametrize("path", ["/v1/user/", "/v1/user/password", "/v1", "/V1/USER"])
def test_only_exact_paths_match(classifier, path):
    assert classifier.bypasses(path, "POST") is False


def test_method_case_is_normalized(classifier):
    assert classifier.bypasses("/v1/user", "post") is True


def test_table_is_immutable():
    source = {"/open": {"GET": True}}
    classifier = security.RouteClassifier(source)

    source["/open"]["POST"] = True
    source["/other"] = {"GET": True}
    assert classifier.bypasses("/open", "POST") is False
    assert classifier.bypasses("/other", "GET") is False

    with pytest.raises(TypeError):
        classifier.routes["/x"] = {"GET": True}
    with pytest.raises(TypeError):
        classifier.routes["/open"]["POST"] = True


def test_false_entries_do_not_bypass():
    classifier = security.RouteClassifier({"/closed": {"GET": False}})
    assert classifier.bypasses("/closed", "GET") is False
