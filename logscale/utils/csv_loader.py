import numpy as np
import pandas as pd
from typing import Dict, Optional, Tuple
from ..config.scale_config import ScaleConfig
from ..scale.exceptions import InvalidBoundsError
from ..scale.log_scale import LogScale
from .logging_config import get_logger

logger = get_logger(__name__)

class CSVDataManager:
    """Loads tabular data from a CSV file and builds log scales from its columns."""

    def __init__(self, csv_path: str):
        self.csv_path = csv_path
        self.data = self._load_csv()

    def _load_csv(self) -> pd.DataFrame:
        """Load the CSV into a DataFrame."""
        try:
            df = pd.read_csv(self.csv_path)
        except FileNotFoundError:
            raise FileNotFoundError(f"CSV file not found at path: {self.csv_path}")
        except Exception as e:
            raise ValueError(f"Failed to load CSV from {self.csv_path}: {e}")

        logger.info(f"Loaded {len(df)} rows, {len(df.columns)} columns from {self.csv_path}")
        return df

    def _numeric_column(self, column: str) -> pd.Series:
        if column not in self.data.columns:
            raise ValueError(f"Column '{column}' not found. Available columns: {list(self.data.columns)}")
        values = pd.to_numeric(self.data[column], errors='coerce')
        return values.replace([np.inf, -np.inf], np.nan).dropna()

    def get_bounds(self, column: str) -> Tuple[float, float]:
        """Smallest and largest numeric value of a column."""
        values = self._numeric_column(column)
        if values.empty:
            raise ValueError(f"Column '{column}' contains no finite numeric values.")
        return float(values.min()), float(values.max())

    def get_scale(self, column: str, config: Optional[ScaleConfig] = None) -> LogScale:
        """Calculated scale spanning the numeric values of a column."""
        try:
            return LogScale.from_values(self._numeric_column(column), config=config)
        except InvalidBoundsError as e:
            raise ValueError(f"Column '{column}': {e}")

    def get_all_scales(self, config: Optional[ScaleConfig] = None) -> Dict[str, LogScale]:
        """Scales for every column holding at least one finite number."""
        scales = {}
        for column in self.data.columns:
            try:
                scales[column] = self.get_scale(column, config)
            except ValueError:
                logger.info(f"Skipping non-numeric column '{column}'")
        return scales
