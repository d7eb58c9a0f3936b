"""The module contains the global Tessera exception and warning classes."""


class ImproperlyConfigured(Exception):
    """Raised when Tessera is somehow improperly configured."""


class InfusionFailed(Exception):
    """Raised when a widget cannot be rebuilt from
    a configuration snapshot.
    """
