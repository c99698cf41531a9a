"""
Upload target settings.

Defaults point at the public image bed; each one can be overridden from the
environment (IMGBED_ENDPOINT, IMGBED_AUTH_TOKEN, ...) or from the CLI flags.
"""

import os
from dataclasses import dataclass, replace

DEFAULT_ENDPOINT       = "https://jmrximg.993988.xyz"
DEFAULT_AUTH_TOKEN     = "jmrx"
DEFAULT_UPLOAD_CHANNEL = "huggingface"
DEFAULT_CHANNEL_NAME   = "imgbed"
DEFAULT_TIMEOUT        = 30.0
DEFAULT_USER_AGENT     = ("Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
                          "(KHTML, like Gecko) Chrome/144.0.0.0 Safari/537.36")

ACCEPT = "application/json, text/plain, */*"


@dataclass(frozen=True)
class UploadConfig:
    endpoint: str = DEFAULT_ENDPOINT
    auth_token: str = DEFAULT_AUTH_TOKEN
    upload_channel: str = DEFAULT_UPLOAD_CHANNEL
    channel_name: str = DEFAULT_CHANNEL_NAME
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        return cls(
            endpoint=env.get("IMGBED_ENDPOINT", DEFAULT_ENDPOINT),
            auth_token=env.get("IMGBED_AUTH_TOKEN", DEFAULT_AUTH_TOKEN),
            upload_channel=env.get("IMGBED_UPLOAD_CHANNEL", DEFAULT_UPLOAD_CHANNEL),
            channel_name=env.get("IMGBED_CHANNEL_NAME", DEFAULT_CHANNEL_NAME),
            timeout=float(env.get("IMGBED_TIMEOUT", DEFAULT_TIMEOUT)),
            user_agent=env.get("IMGBED_USER_AGENT", DEFAULT_USER_AGENT),
        )

    def override(self, **changes):
        """Copy with the non-None values of ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def origin(self) -> str:
        return self.endpoint.rstrip("/")

    @property
    def upload_url(self) -> str:
        return f"{self.origin}/upload"

    def query_params(self):
        return [
            ("serverCompress", "false"),
            ("uploadChannel", self.upload_channel),
            ("channelName", self.channel_name),
            ("uploadNameType", "default"),
            ("autoRetry", "true"),
            ("uploadFolder", ""),
        ]

    def headers(self, content_type: str):
        return {
            "Content-Type": content_type,
            "accept": ACCEPT,
            "authcode": self.auth_token,
            "origin": self.origin,
            "referer": f"{self.origin}/",
            "user-agent": self.user_agent,
        }
