from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping

from elle_browser.config.model import GlobalConfig
from elle_browser.core.dataset import Dataset
from elle_browser.services.browser_session import SwitchPolicy


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    datasets: Mapping[str, Dataset]
    default_language: str
    switch_policy: SwitchPolicy = SwitchPolicy.PRUNE

    @property
    def languages(self) -> List[str]:
        return list(self.datasets)

    def validate(self) -> None:
        """Ensure the default language is one we can actually load."""
        if self.default_language not in self.datasets:
            raise RuntimeError(
                f"Default language '{self.default_language}' has no dataset; "
                f"configured: {self.languages}"
            )
