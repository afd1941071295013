import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from vedic_kundali.domain.kundali.converters import (
    birth_input_from_payload,
    chart_to_dict,
)
from vedic_kundali.domain.kundali.engine import KundaliEngine

logger = logging.getLogger(__name__)


class KundaliService:
    """
    Core orchestration service for kundali generation.
    """

    def __init__(self, engine: KundaliEngine | None = None):
        self.engine = engine or KundaliEngine()

    def create_kundali(
        self,
        payload: Mapping[str, Any],
        as_of: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Validate form payload, compute the chart and return it as plain JSON.
        """
        # 1. Birth details
        birth_input = birth_input_from_payload(payload)

        # 2. Kundali (D1 + dasha + panchang)
        kundali_chart = self.engine.generate(birth_input, as_of=as_of)

        # 3. Serialized result
        result = chart_to_dict(kundali_chart)

        logger.info(
            f"Kundali created for {birth_input.name or 'anonymous'} "
            f"({len(kundali_chart.dasha.periods)} dasha periods, "
            f"{len(kundali_chart.meta.warnings)} warnings)"
        )
        return result
