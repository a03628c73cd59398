from typing import List, Optional

import pandas as pd

from dlmm_mcp.constants import DEFAULT_POOL_LIMIT
from dlmm_mcp.models.pair import PoolSummary


class PoolAnalyzer:
    @staticmethod
    def pools_to_dataframe(pools: List[PoolSummary]) -> pd.DataFrame:
        """One row per pool, with ``liquidity`` parsed to float (unparseable -> 0)."""
        df = pd.DataFrame(
            {
                "position": range(len(pools)),
                "liquidity": [pool.liquidity for pool in pools],
            }
        )
        df["liquidity"] = pd.to_numeric(df["liquidity"], errors="coerce").fillna(0.0)
        return df

    @staticmethod
    def rank_by_liquidity(pools: List[PoolSummary], limit: Optional[int] = DEFAULT_POOL_LIMIT) -> List[PoolSummary]:
        """
        Keep pools with positive liquidity, sort them by liquidity (highest
        first) and truncate to ``limit``. A missing or non-positive limit
        means the default. Ties keep their upstream order.
        """
        if not limit or limit <= 0:
            limit = DEFAULT_POOL_LIMIT
        if not pools:
            return []

        df = PoolAnalyzer.pools_to_dataframe(pools)
        df = df[df["liquidity"] > 0]
        df = df.sort_values("liquidity", ascending=False, kind="mergesort").head(limit)
        return [pools[i] for i in df["position"]]
