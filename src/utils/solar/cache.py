"""
Caching for solar calculations so repeated calculate() calls reuse work
"""

import logging
from typing import Dict, Optional, Tuple

from models.events import Direction
from models.results import SolarEventResult
from .position import SolarPipeline

logger = logging.getLogger(__name__)

PipelineKey = Tuple[int, float, Direction]


class SolarCache:
    """Holds intermediate pipelines and the latest result for one calculator"""

    def __init__(self):
        # Zenith-independent pipelines, shared by every event class
        self._pipeline_cache: Dict[PipelineKey, SolarPipeline] = {}

        # Result for the current inputs; empty until calculate() runs
        self._result: SolarEventResult = SolarEventResult()

    def get_pipeline(
        self, day_of_year: int, longitude_hour: float, direction: Direction
    ) -> Optional[SolarPipeline]:
        """Get a cached pipeline for a day, longitude and direction"""
        return self._pipeline_cache.get(
            self.create_cache_key(day_of_year, longitude_hour, direction)
        )

    def set_pipeline(
        self, day_of_year: int, longitude_hour: float, pipeline: SolarPipeline
    ) -> None:
        """Cache a pipeline"""
        key = self.create_cache_key(day_of_year, longitude_hour, pipeline.direction)
        self._pipeline_cache[key] = pipeline
        logger.debug(f"Cached solar pipeline: {key}")

    def get_result(self) -> SolarEventResult:
        return self._result

    def set_result(self, result: SolarEventResult) -> None:
        self._result = result

    @staticmethod
    def create_cache_key(
        day_of_year: int, longitude_hour: float, direction: Direction
    ) -> PipelineKey:
        """Create a standardized cache key for pipelines"""
        return (day_of_year, longitude_hour, direction)

    def clear_all(self) -> None:
        """Drop cached pipelines and reset every result field to absent"""
        self._pipeline_cache.clear()
        self._result = SolarEventResult()
        logger.debug("Cleared solar cache")

    def get_cache_stats(self) -> Dict[str, int]:
        """Get statistics about cache usage"""
        return {
            "pipelines_cached": len(self._pipeline_cache),
            "results_computed": sum(
                1 for value in self._result.as_dict().values() if value is not None
            ),
        }
