import importlib.metadata

try:
    VERSION = importlib.metadata.version("fcs-frame-decoder")
except importlib.metadata.PackageNotFoundError:
    # Not installed (e.g. running tests from a checkout)
    VERSION = "0.0.0-dev"
