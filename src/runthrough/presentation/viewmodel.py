from collections.abc import Callable

from src.fsm import RunthroughAction, RunthroughState, RunthroughStateMachine
from src.runthrough.adapters.gnupod_repository import GnuPodCatalogRepository
from src.runthrough.application.service import RunthroughService
from src.runthrough.domain.models import CatalogError, InvalidWeightError, Track
from src.runthrough.presentation.state_provider import IStateProvider
from src.shared.telemetry import Telemetry

ServiceFactory = Callable[[str], RunthroughService]


def gnupod_service(path: str) -> RunthroughService:
    return RunthroughService(GnuPodCatalogRepository(path))


class RunthroughViewModel:
    def __init__(
        self,
        state_provider: IStateProvider,
        service_factory: ServiceFactory = gnupod_service,
    ):
        self.state = state_provider
        self.service_factory = service_factory
        self.telemetry = Telemetry("ViewModel")

        saved_fsm = self.state.get("fsm_state", RunthroughState.IDLE)
        self.fsm = RunthroughStateMachine(initial_state=saved_fsm)

    # --- Properties ---
    @property
    def current_state(self) -> RunthroughState:
        return self.fsm.current_state

    @property
    def service(self) -> RunthroughService | None:
        return self.state.get("service")

    @property
    def db_path(self) -> str | None:
        return self.state.get("db_path")

    @property
    def catalog(self) -> list[Track]:
        return self.state.get("catalog") or []

    @property
    def runthrough(self) -> list[Track]:
        return self.state.get("runthrough") or []

    @property
    def error(self) -> str | None:
        return self.state.get("error")

    # --- Actions (Traced) ---

    def load_catalog(self, path: str) -> None:
        Telemetry.start_trace()
        self.telemetry.log_info("Action: Load Catalog", path=path)
        self.reset()

        try:
            service = self.service_factory(path)
            catalog = service.weighted_tracks()
        except CatalogError as e:
            self.telemetry.log_error("Load failed", e, path=path)
            self.state.set("error", str(e))
            return

        self.state.set("service", service)
        self.state.set("db_path", path)
        self.state.set("catalog", catalog)

        if catalog:
            self.fsm.transition(RunthroughAction.LOAD_SUCCESS)
        else:
            self.fsm.transition(RunthroughAction.LOAD_EMPTY)
        self._persist_fsm()

    def shuffle(self, seed: int | None = None) -> None:
        Telemetry.start_trace()
        service = self.service
        if service is None:
            self.telemetry.log_error("Shuffle failed", Exception("No catalog loaded"))
            return

        service.reseed(seed)
        try:
            ordered = service.build_runthrough()
        except InvalidWeightError as e:
            self.state.set("error", str(e))
            return

        if self.fsm.transition(RunthroughAction.SHUFFLE):
            self.state.set("runthrough", ordered)
            self.state.set("error", None)
        self._persist_fsm()

    def save(self) -> str | None:
        Telemetry.start_trace()
        service = self.service
        if service is None or self.current_state != RunthroughState.RANKED:
            self.telemetry.log_error("Save failed", Exception("Nothing to save"))
            return None

        service.save_runthrough(self.runthrough)
        try:
            written = service.repository.write()
        except CatalogError as e:
            self.telemetry.log_error("Save failed", e, path=self.db_path)
            self.state.set("error", str(e))
            return None

        self.fsm.transition(RunthroughAction.SAVE)
        self._persist_fsm()
        return written

    def reset(self) -> None:
        self.fsm.transition(RunthroughAction.RESET)
        for key in ("service", "db_path", "catalog", "runthrough", "error"):
            self.state.set(key, None)
        self._persist_fsm()

    def _persist_fsm(self) -> None:
        self.state.set("fsm_state", self.fsm.current_state)
