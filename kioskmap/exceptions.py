class KioskMapError(Exception):
    pass


class DeserializationError(KioskMapError):
    pass


class AdapterError(KioskMapError):
    pass


class InputNotFoundError(KioskMapError):
    pass


class KioskMapParameterError(KioskMapError):
    pass
