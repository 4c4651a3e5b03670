from l10n_client.domain.models import Locale

__all__ = ["Locale"]
