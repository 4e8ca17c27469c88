# storefront/errors.py


class StorefrontError(Exception):
    pass


class StorageInitError(StorefrontError):
    """Opening, creating or seeding the database failed; the server cannot start."""
