"""Use Case for storing contact, event and network form submissions."""

from typing import Union

from domain.entities import ContactMessage, EventRegistration, NetworkSignup
from domain.repositories import IInquiryRepository
from infrastructure.config import get_logger


Inquiry = Union[ContactMessage, EventRegistration, NetworkSignup]


class RecordInquiryUseCase:
    """Persist one of the secondary public forms."""

    def __init__(self, inquiry_repository: IInquiryRepository):
        self.inquiry_repo = inquiry_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, inquiry: Inquiry) -> Inquiry:
        if isinstance(inquiry, ContactMessage):
            saved = await self.inquiry_repo.add_contact_message(inquiry)
        elif isinstance(inquiry, EventRegistration):
            saved = await self.inquiry_repo.add_event_registration(inquiry)
        elif isinstance(inquiry, NetworkSignup):
            saved = await self.inquiry_repo.add_network_signup(inquiry)
        else:
            raise TypeError(f"Unsupported inquiry type: {type(inquiry).__name__}")

        self.logger.info(f"Recorded {type(saved).__name__} {saved.id}")
        return saved
