"""Repository interface for the secondary public forms."""

from abc import ABC, abstractmethod

from domain.entities import ContactMessage, EventRegistration, NetworkSignup


class IInquiryRepository(ABC):
    """
    Abstract repository for contact messages, event registrations and
    network signups. Each lives in its own table and shares no logic
    beyond persistence.
    """

    @abstractmethod
    async def add_contact_message(self, message: ContactMessage) -> ContactMessage:
        pass

    @abstractmethod
    async def add_event_registration(self, registration: EventRegistration) -> EventRegistration:
        pass

    @abstractmethod
    async def add_network_signup(self, signup: NetworkSignup) -> NetworkSignup:
        pass
