# scripts/make_mock_csv.py

from pathlib import Path

import numpy as np
import pandas as pd


def main(n_rows: int = 5000) -> None:
    # project root = parent of this file's directory
    root = Path(__file__).resolve().parent.parent
    data_dir = root / "data"
    data_dir.mkdir(exist_ok=True)

    rng = np.random.default_rng(42)

    frame = pd.DataFrame(
        {
            "id": np.arange(1, n_rows + 1),
            "country": rng.choice(["France", "Germany", "Italy", "Spain", "Sweden"], size=n_rows),
            "product": rng.choice(["Bike", "Helmet", "Lamp", "Lock", "Pump", "Tyre"], size=n_rows),
            "channel": rng.choice(["Online", "Retail", "Wholesale"], size=n_rows),
            "year": rng.integers(2018, 2025, size=n_rows),
            "quantity": rng.integers(1, 50, size=n_rows),
            "unitPrice": rng.choice([4.99, 9.5, 12.0, 24.99, 149.0, 1299.0], size=n_rows),
        }
    )

    out = data_dir / "dataset_large.csv"
    frame.to_csv(out, index=False)
    print("wrote", out, frame.shape)


if __name__ == "__main__":
    main()
