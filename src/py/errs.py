## errs.py
## last updated: 19/10/2026 <d/m/y>
## m-c-r-p

class PackError(ValueError):
    pass

class ManifestUnreadable(PackError):
    pass

class ContainerError(PackError):
    pass

class KeyFileUnreadable(PackError):
    pass

class InvalidKeyLength(PackError):
    def __init__(self, what, length, expected=32):
        super().__init__(f"{what} must be exactly {expected} bytes, got {length}.")
        self.what = what
        self.length = length

class MalformedManifest(PackError):
    pass

class OperationCanceled(PackError):
    pass

## end
