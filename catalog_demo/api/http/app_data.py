from dataclasses import dataclass, field

from catalog_demo.core.services import DbSessionService, PlaceholderClient


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    placeholder_client: PlaceholderClient
    static_pages: dict[str, str] = field(default_factory=dict)
