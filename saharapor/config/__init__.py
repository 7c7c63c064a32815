from .settings import SahaRaporConfig

__all__ = ['SahaRaporConfig']
