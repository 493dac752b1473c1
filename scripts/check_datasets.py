from pathlib import Path

from elle_browser.config.loader import load_global_config
from elle_browser.core.dataset_loader import DatasetConfigError, from_config
from elle_browser.core.exceptions import DatasetSchemaError
from elle_browser.validation.errors import ValidationError

BASE_DIR = Path(__file__).parent.parent
CONFIG_DIR = BASE_DIR / "config"


def check_datasets(config_dir: Path = CONFIG_DIR):
    print(f"{'DATASET':<20} | {'LANG':<5} | {'FACET':<10} | {'VALUES'}")
    print("-" * 85)

    global_config = load_global_config(config_dir)
    if not global_config.datasets:
        print(f"No dataset configs found in {config_dir / 'datasets'}")
        return

    for cfg in global_config.datasets:
        try:
            ds = from_config(cfg, data_root=global_config.data_root)
        except (DatasetConfigError, DatasetSchemaError, ValidationError) as e:
            print(f"{cfg.name:<20} | Error: {e}")
            continue

        print(f"{ds.name:<20} | {ds.language:<5} | {'records':<10} | {len(ds)}")
        for facet in ("difficulty", "type", "domain"):
            counts = ds.value_counts(facet)
            summary = ", ".join(f"{v} ({n})" for v, n in counts.items())
            print(f"{ds.name:<20} | {ds.language:<5} | {facet:<10} | {summary}")
        print("-" * 85)


if __name__ == "__main__":
    check_datasets()
