"""Client for the remote language-model diagnostic service."""

import json
import logging
from typing import List, Optional, Dict, Any

import httpx
from pydantic import ValidationError

from ..config import DiagnosticConfig
from ..exceptions import DiagnosticError
from ..models.signal import SignalDescriptor, DiagnosticReport

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """
You are an expert automotive data engineer. Analyze the following statistical summary of vehicle signal data derived from a log file named "{file_name}".

Data Summary:
{summary}

Please provide:
1. A brief executive summary of the vehicle's operating state.
2. Potential anomalies (e.g., if temperatures are too high, voltage too low, or inconsistent speed/rpm ratios based on general automotive knowledge).
3. Recommendations for further inspection.

Return the response in JSON format.
"""

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "summary": {"type": "STRING"},
        "anomalies": {"type": "ARRAY", "items": {"type": "STRING"}},
        "recommendations": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["summary", "anomalies", "recommendations"],
}


class DiagnosticClient:
    """Sends signal statistics to the diagnostic model and parses its verdict."""

    def __init__(
        self,
        config: Optional[DiagnosticConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize diagnostic client.

        Args:
            config: Service settings (read from the environment if omitted)
            transport: Optional httpx transport, used for testing
        """
        self._config = config or DiagnosticConfig.from_env()
        self._transport = transport

    def build_prompt(self, file_name: str, signals: List[SignalDescriptor]) -> str:
        """Render the analysis prompt for a log."""
        summary = json.dumps([s.summary() for s in signals], indent=2, ensure_ascii=False)
        return PROMPT_TEMPLATE.format(file_name=file_name, summary=summary)

    def _request_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }

    def analyze(self, file_name: str, signals: List[SignalDescriptor]) -> DiagnosticReport:
        """
        Request a diagnostic summary for a parsed log.

        Args:
            file_name: Name of the analysed log
            signals: Descriptors with statistics attached

        Returns:
            DiagnosticReport

        Raises:
            DiagnosticError: If the key is missing or the call fails
        """
        if not self._config.api_key:
            raise DiagnosticError("API key is not set (GEMINI_API_KEY or API_KEY)")

        url = f"{self._config.base_url}/models/{self._config.model}:generateContent"
        body = self._request_body(self.build_prompt(file_name, signals))

        try:
            with httpx.Client(timeout=self._config.timeout, transport=self._transport) as client:
                response = client.post(url, params={"key": self._config.api_key}, json=body)
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException as e:
            logger.warning("Diagnostic service timeout")
            raise DiagnosticError("Diagnostic service timed out") from e
        except httpx.HTTPError as e:
            logger.warning(f"Diagnostic service error: {e}")
            raise DiagnosticError(f"Diagnostic service error: {e}") from e
        except ValueError as e:
            raise DiagnosticError("Diagnostic service returned invalid JSON") from e

        return self._parse_response(payload)

    @staticmethod
    def _parse_response(payload: Dict[str, Any]) -> DiagnosticReport:
        try:
            text = payload["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise DiagnosticError("Empty response from diagnostic service") from e

        if not text:
            raise DiagnosticError("Empty response from diagnostic service")

        try:
            return DiagnosticReport.model_validate_json(text)
        except ValidationError as e:
            raise DiagnosticError(f"Malformed diagnostic report: {e}") from e
