

class ElleBrowserError(Exception):
    """Base exception for all elle_browser errors"""
    pass

class ConfigError(ElleBrowserError):
    """Invalid or inconsistent global.json / dataset config"""
    pass

class DatasetSchemaError(ElleBrowserError):
    """
    Question records don't match what Dataset expects:
    duplicate ids, multi-valued fields that are neither a value nor a list of values, etc
    """
    pass
