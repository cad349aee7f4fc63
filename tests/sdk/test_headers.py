from fetchkit._utils import auth_header, build_headers


class TestBuildHeaders:
    def test_defaults_with_token(self):
        assert build_headers("abc") == {
            "Content-Type": "application/json",
            "Authorization": "Bearer abc",
        }

    def test_no_token_omits_authorization(self):
        assert build_headers(None) == {"Content-Type": "application/json"}
        assert build_headers("") == {"Content-Type": "application/json"}

    def test_caller_headers_win_case_insensitively(self):
        headers = build_headers(
            "abc", {"content-type": "text/csv", "authorization": "Basic xyz"}
        )

        assert headers == {"content-type": "text/csv", "authorization": "Basic xyz"}

    def test_caller_headers_are_added(self):
        headers = build_headers("abc", {"X-Request-Id": "42"})

        assert headers["X-Request-Id"] == "42"
        assert headers["Authorization"] == "Bearer abc"

    def test_multipart_has_no_default_content_type(self):
        assert build_headers("abc", multipart=True) == {"Authorization": "Bearer abc"}

    def test_auth_header(self):
        assert auth_header("t") == {"Authorization": "Bearer t"}
        assert auth_header(None) == {}
