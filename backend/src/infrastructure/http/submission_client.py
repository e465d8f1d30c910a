"""HTTP gateway used by the application wizard to reach the API."""

from typing import Optional

import httpx

from application.interfaces import ISubmissionGateway, SubmissionRejected
from domain.entities import ApplicationDraft
from domain.value_objects import DocumentUpload
from infrastructure.config import get_logger


# Wire names used by the multipart submission endpoint
FIELD_NAMES = {
    "founder_name": "founderName",
    "email": "email",
    "phone": "phone",
    "venture_name": "ventureName",
    "industry": "industry",
    "gdpr_consent": "gdprConsent",
    "pitch_deck": "pitchDeck",
    "business_plan": "businessPlan",
}
_DRAFT_NAMES = {wire: name for name, wire in FIELD_NAMES.items()}


class ApplicationSubmissionClient(ISubmissionGateway):
    """
    POST a draft as multipart form data and interpret the JSON reply.

    Every failure mode (HTTP error, invalid JSON, transport error) is
    reported as ``SubmissionRejected``.
    """

    def __init__(
        self,
        base_url: str,
        path: str = "/api/v1/applications",
        timeout: float = 60.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = base_url.rstrip("/") + path
        self.timeout = timeout
        self._client = client
        self.logger = get_logger(self.__class__.__name__)

    async def submit(self, draft: ApplicationDraft) -> str:
        data, files = self._encode(draft)
        try:
            if self._client is not None:
                response = await self._client.post(self.url, data=data, files=files, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.url, data=data, files=files)
        except httpx.TimeoutException as e:
            raise SubmissionRejected("The server took too long to respond.", retryable=True) from e
        except httpx.HTTPError as e:
            self.logger.error(f"Submission failed during API call: {e}")
            raise SubmissionRejected(
                "Could not connect to the server or file upload failed.", retryable=True
            ) from e

        try:
            payload = response.json()
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            payload = {"message": f"Unknown server error (HTTP {response.status_code})."}

        if response.is_success and payload.get("success"):
            tracking_token = payload.get("trackingToken")
            if not tracking_token:
                raise SubmissionRejected("The server did not return a tracking ID.", retryable=True)
            return tracking_token

        reported = payload.get("errors")
        errors = {
            _DRAFT_NAMES.get(field, field): reason
            for field, reason in (reported if isinstance(reported, dict) else {}).items()
        }
        raise SubmissionRejected(
            payload.get("message") or f"HTTP error! Status: {response.status_code}",
            errors=errors,
            retryable=response.status_code >= 500,
        )

    def _encode(self, draft: ApplicationDraft) -> tuple[dict[str, str], dict[str, tuple]]:
        """Split the draft into form fields and file parts."""
        data = {
            FIELD_NAMES["founder_name"]: draft.founder_name,
            FIELD_NAMES["email"]: draft.email,
            FIELD_NAMES["venture_name"]: draft.venture_name,
            FIELD_NAMES["industry"]: draft.industry,
            FIELD_NAMES["gdpr_consent"]: "true" if draft.gdpr_consent else "false",
        }
        if draft.phone:
            data[FIELD_NAMES["phone"]] = draft.phone

        files = {}
        for name in ("pitch_deck", "business_plan"):
            document = getattr(draft, name)
            if document is None:
                continue
            if not isinstance(document, DocumentUpload):
                raise SubmissionRejected(f"{FIELD_NAMES[name]} has no file content to upload.")
            files[FIELD_NAMES[name]] = (document.filename, document.content, document.content_type)
        return data, files
