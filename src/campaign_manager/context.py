"""
Service context: one store plus every repository and service built over it.

The application entry point owns the context; tests build one per test over a
fresh in-memory store.
"""

from dataclasses import dataclass, field

from campaign_manager.auth.rbac import AccessControl
from campaign_manager.auth.repository import UserRepository
from campaign_manager.auth.service import UserService
from campaign_manager.campaigns.repository import CampaignRepository
from campaign_manager.campaigns.service import CampaignService
from campaign_manager.config import Settings
from campaign_manager.finance.repository import DonationRepository, ExpenseRepository
from campaign_manager.finance.service import DonationService, ExpenseService
from campaign_manager.messaging.repository import MessageRepository
from campaign_manager.messaging.service import MessageService
from campaign_manager.notifications.repository import NotificationRepository
from campaign_manager.notifications.service import NotificationService
from campaign_manager.outreach.repository import OutreachRepository
from campaign_manager.outreach.service import OutreachService
from campaign_manager.shared.clock import Clock, IdFactory, new_id, utc_now_iso
from campaign_manager.shared.database import DatabaseManager, SqlKeyValueStore
from campaign_manager.shared.logging import get_logger
from campaign_manager.shared.store import InMemoryKeyValueStore, KeyValueStore

logger = get_logger(__name__)


@dataclass
class ServiceContext:
    """Wires repositories and services over a shared store."""

    store: KeyValueStore
    clock: Clock = utc_now_iso
    id_factory: IdFactory = new_id
    db_manager: DatabaseManager | None = None

    users: UserService = field(init=False)
    campaigns: CampaignService = field(init=False)
    donations: DonationService = field(init=False)
    expenses: ExpenseService = field(init=False)
    outreach: OutreachService = field(init=False)
    messages: MessageService = field(init=False)
    notifications: NotificationService = field(init=False)

    def __post_init__(self) -> None:
        user_repo = UserRepository(self.store)
        campaign_repo = CampaignRepository(self.store)
        access = AccessControl(user_repo)
        timing = {"clock": self.clock, "id_factory": self.id_factory}

        self.notifications = NotificationService(NotificationRepository(self.store), **timing)
        self.users = UserService(user_repo, **timing)
        self.campaigns = CampaignService(campaign_repo, access, self.notifications, **timing)
        self.donations = DonationService(
            DonationRepository(self.store), campaign_repo, access, self.notifications, **timing
        )
        self.expenses = ExpenseService(
            ExpenseRepository(self.store), campaign_repo, access, self.notifications, **timing
        )
        self.outreach = OutreachService(
            OutreachRepository(self.store), campaign_repo, access, self.notifications, **timing
        )
        self.messages = MessageService(
            MessageRepository(self.store), campaign_repo, access, self.notifications, **timing
        )

    def close(self) -> None:
        if self.db_manager is not None:
            self.db_manager.close()


def create_context(settings: Settings) -> ServiceContext:
    """Build the service context for the configured storage backend."""
    if settings.storage_backend == "sql":
        db_manager = DatabaseManager(settings.database_url)
        store: KeyValueStore = SqlKeyValueStore(db_manager)
        logger.info("Using SQL record store", extra={"storage_backend": "sql"})
        return ServiceContext(store=store, db_manager=db_manager)

    logger.info("Using in-memory record store")
    return ServiceContext(store=InMemoryKeyValueStore())
