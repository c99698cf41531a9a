from imgbed.config import DEFAULT_ENDPOINT, UploadConfig


def test_defaults():
    c = UploadConfig.from_env({})
    assert c.endpoint == DEFAULT_ENDPOINT
    assert c.upload_url == DEFAULT_ENDPOINT + "/upload"
    assert c.timeout == 30.0
    assert ("uploadFolder", "") in c.query_params()
    assert ("serverCompress", "false") in c.query_params()
    assert ("autoRetry", "true") in c.query_params()


def test_env_and_overrides():
    c = UploadConfig.from_env({
        "IMGBED_ENDPOINT": "https://img.example.com/",
        "IMGBED_TIMEOUT": "5",
        "IMGBED_CHANNEL_NAME": "notes",
    })
    assert c.origin == "https://img.example.com"
    assert c.timeout == 5.0
    assert ("channelName", "notes") in c.query_params()

    c2 = c.override(auth_token="secret", endpoint=None)
    assert c2.auth_token == "secret"
    assert c2.endpoint == c.endpoint


def test_headers():
    h = UploadConfig(endpoint="https://img.example.com", auth_token="t").headers("multipart/form-data; boundary=x")
    assert h["Content-Type"] == "multipart/form-data; boundary=x"
    assert h["authcode"] == "t"
    assert h["origin"] == "https://img.example.com"
    assert h["referer"] == "https://img.example.com/"
    assert h["accept"] == "application/json, text/plain, */*"
    assert "Mozilla" in h["user-agent"]
