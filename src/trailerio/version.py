from importlib.metadata import PackageNotFoundError, version

try:
    version = version("TrailerIO")
except PackageNotFoundError:
    version = "0.0.0"
