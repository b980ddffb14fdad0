from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    try:
        return version("batch-sort")
    except PackageNotFoundError:
        # Fallback during source-tree runs
        return "0.1.0"
