"""Errors raised by SDK plugins."""

from __future__ import annotations


class SDKMError(Exception):
    """Base of all plugin errors; an optional detail is prefixed to the message."""

    message = "sdkm error"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.detail:
            return f"{self.detail}: {self.message}"
        return self.message


class SDKVersionNotFoundError(SDKMError):
    message = "SDK version not found"


class SDKInstallError(SDKMError):
    message = "SDK install error"


class DownloadFailedError(SDKMError):
    message = "download failed"


class ExecuteFailedError(SDKMError):
    message = "execute failed"


class PluginError(SDKMError):
    """An error tied to one plugin identifier."""

    message = "plugin error"

    def __init__(self, plugin_id: str) -> None:
        self.plugin_id = str(plugin_id)
        super().__init__()

    def __str__(self) -> str:
        return f"{self.message}: {self.plugin_id}"


class PluginNotFoundError(PluginError):
    message = "plugin not found"


class PluginInitializeError(PluginError):
    message = "failed to initialize plugin"