"""Offline analysis client.

Returns a fixed, well-formed findings document without any network call.
Useful for local development and as a template for new provider adapters:
implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from medingest.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Adapter that answers every request with DEFAULT_RESPONSE."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "report_title": "Medical Report",
        "doctor_name": "Not specified",
        "report_date": "Not specified",
        "tests": [],
        "summary": "No abnormal values were found in this report.",
    }

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        segments: list[str],
    ) -> str:
        _ = model, temperature, segments
        return json.dumps(self.DEFAULT_RESPONSE)
