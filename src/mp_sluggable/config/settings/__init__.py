"""Config settings – slug settings dataclass and environment loader."""
from mp_sluggable.config.settings.base import Settings
from mp_sluggable.config.settings.loaders import EnvSettingsLoader
from mp_sluggable.config.settings.sluggable import SluggableSettings

__all__ = ["EnvSettingsLoader", "Settings", "SluggableSettings"]
