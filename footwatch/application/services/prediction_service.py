"""
Prediction pipeline.

Turns session telemetry and metadata into a condition/confidence report.
The external model is optional: when it is unconfigured, slow, or
failing, the fixed fallback outcome is used instead, so prediction never
hard-fails the caller. Exactly one report is written per call.

Dependencies: footwatch.boundary (stores, model client), footwatch.core.outcomes
System role: Prediction and report authoring use case
"""

import logging
from typing import Any

from footwatch.application.services.session_service import SessionService
from footwatch.boundary.identity import CallerIdentity
from footwatch.boundary.ml.model_client import PredictionModelClient
from footwatch.boundary.stores import ReportStore, SampleStore
from footwatch.core.exceptions import UpstreamDegradedError
from footwatch.core.outcomes import FALLBACK_OUTCOME, PredictionOutcome, outcome_from_model
from footwatch.models.report import PredictRequest

logger = logging.getLogger(__name__)


class PredictionService:
    """Prediction pipeline orchestrator."""

    def __init__(
        self,
        session_service: SessionService,
        samples: SampleStore,
        reports: ReportStore,
        model_client: PredictionModelClient,
        history_samples: int = 20,
    ) -> None:
        """
        Initialize prediction pipeline.

        Args:
            session_service: Session manager (ownership checks)
            samples: Sample store (pressure history)
            reports: Report store
            model_client: External model client
            history_samples: Samples sent when a request carries no pressure
        """
        self.session_service = session_service
        self.samples = samples
        self.reports = reports
        self.model_client = model_client
        self.history_samples = history_samples

    async def predict(self, caller: CallerIdentity, request: PredictRequest):
        """
        Run one prediction and persist its report.

        Args:
            caller: Authenticated user, owner of the report
            request: Validated prediction input

        Returns:
            ReportModel: The single report written for this call

        Raises:
            SessionNotFoundError: If session_id is unknown
            ForbiddenError: If caller does not own the session
        """
        pressure = request.pressure
        if request.session_id is not None:
            await self.session_service.get_session(request.session_id, caller)
            if pressure is None:
                pressure = list(await self.samples.latest_grids(request.session_id, self.history_samples))

        payload = {
            "session_id": str(request.session_id) if request.session_id else None,
            "metadata": request.metadata,
            "pressure": pressure,
        }
        outcome = await self.run_model(payload)

        report = await self.reports.create_report(
            user_id=caller.user_id,
            session_id=request.session_id,
            outcome=outcome,
            recommendation=outcome.recommendation,
        )
        await self.reports.commit()
        logger.info(
            "Report created",
            extra={
                "report_id": str(report.id),
                "condition": outcome.condition,
                "source": outcome.source.value,
            },
        )
        return report

    async def run_model(self, payload: dict[str, Any]) -> PredictionOutcome:
        """
        Ask the external model, falling back on any failure.

        Args:
            payload: Body for the model service

        Returns:
            PredictionOutcome: Model-derived or fallback outcome
        """
        if not self.model_client.enabled:
            logger.info("No prediction model configured; using fallback outcome")
            return FALLBACK_OUTCOME

        try:
            body = await self.model_client.predict(payload)
        except UpstreamDegradedError as e:
            logger.warning(
                "Prediction model degraded; using fallback outcome",
                extra={"error": e.message, **e.details},
            )
            return FALLBACK_OUTCOME

        return outcome_from_model(body)
