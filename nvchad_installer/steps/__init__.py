from .step_00_check_prerequisites import CheckPrerequisitesStep
from .step_10_install_editor import InstallEditorStep
from .step_20_install_font import InstallFontStep
from .step_30_install_distribution import InstallDistributionStep
from .step_40_place_configs import PlaceConfigsStep
from .step_50_install_lsps import InstallLanguageServersStep

__all__ = [
    "CheckPrerequisitesStep",
    "InstallEditorStep",
    "InstallFontStep",
    "InstallDistributionStep",
    "PlaceConfigsStep",
    "InstallLanguageServersStep",
]
