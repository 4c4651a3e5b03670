from l10n_client.utils.keys import build_key, normalize_packages

__all__ = ["build_key", "normalize_packages"]
