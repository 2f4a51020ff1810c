# sdkm

`sdkm` provides the building blocks for managing Go SDKs: it lists the Go
releases published on the Go download page, caches that list on disk,
downloads and unpacks a release archive into a shared SDK directory, and
reads the `go` and `toolchain` directives of a project's `go.mod`.

## Listing releases

```python
from sdkm.versions import GoVersions

versions = GoVersions("https://go.dev/dl")

# Stable releases first, then unstable, then archived.
for version in versions.all_versions(rebuild_cache=False):
    print(version.print())          # e.g. "1.23rc2 (unstable)"

latest = versions.latest_version(rebuild_cache=False)   # newest stable
```

`latest_version` raises `sdkm.errors.SDKVersionNotFoundError` when the page
lists no stable release. Each entry is an `sdkm.sdk_version.SDKVersion` with
`id`, `type` (a `VersionType`: `STABLE`, `UNSTABLE` or `ARCHIVED`) and
`installed`. `print_with_options(out_type, out_installed, out_not_installed)`
chooses which of the `(unstable)`/`(archived)`, `[installed]` and
`[not installed]` annotations are shown.

Pages are fetched through `sdkm.http_client.HTTPClient`, which uses a
5 second timeout by default and raises `requests.TooManyRedirects` when a
redirect chain is longer than 9 hops.

## Caching

By default `GoVersions` keeps the list in memory in a
`sdkm.cache.VersionCache`. To keep it across runs, attach a file storage:

```python
from sdkm.cache import VersionCache
from sdkm.file_storage import FileCacheStorage, for_plugin

cache = VersionCache().with_external_store(FileCacheStorage("/tmp/go-versions.json"))
versions = GoVersions("https://go.dev/dl").with_cache(cache)
```

`for_plugin("go")` gives a storage at `.cache/go.json` next to the running
program. A cache file is considered valid for 24 hours after it was last
written; an unreadable or malformed file is treated as empty.

## Installing an SDK

```python
from sdkm.base_plugin import LocalBasePlugin
from sdkm.downloader import Downloader

base = LocalBasePlugin()            # SDKs under ~/sdk unless a directory is given
downloader = Downloader("linux", "amd64", "https://go.dev/dl", base)

print(downloader.url_for_download("1.22.5"))
# https://go.dev/dl/go1.22.5.linux-amd64.tar.gz  (".zip" for windows)

if not base.has_installed("go", "1.22.5"):
    archive = downloader.download("1.22.5")     # saved under <sdk dir>/.download
    downloader.unpack(archive, base.get_sdk_version_dir("go", "1.22.5"))
```

Each SDK lives in `<sdk dir>/<plugin id>/<version>`, e.g. `~/sdk/go/1.22.5`.
`unpack` extracts into a temporary directory and moves its top-level `go`
directory into place. Failures raise `sdkm.errors.DownloadFailedError`;
`has_installed` raises `NotADirectoryError` if the SDK path is a file.

## Reading go.mod

```python
from sdkm.modfile import read_go_mod_file, parse_go_mod

mod = read_go_mod_file("path/to/project")
print(mod.go)          # e.g. "1.22"
print(mod.toolchain)   # e.g. "go1.23rc1", or None
```

Parse errors and unreadable files raise `sdkm.modfile.GoModError`.

## Errors

Plugin errors derive from `sdkm.errors.SDKMError`:
`SDKVersionNotFoundError`, `SDKInstallError`, `DownloadFailedError`,
`ExecuteFailedError`, and the per-plugin `PluginNotFoundError` and
`PluginInitializeError`.

## What this package does not do

There is no command-line program, and no single object that ties these
pieces together: nothing here picks the version for a project from its
`go.mod`, installs it, or builds the `GOROOT`/`GOPATH`/`GOBIN`/`PATH`
environment for it. There is no registry of plugins and no resolution of
SDK or cache directories from environment variables. These steps are left
to the caller, using the classes above.