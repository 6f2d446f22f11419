from enum import Enum, auto
import logging

logger = logging.getLogger(__name__)


class RunthroughState(Enum):
    IDLE = auto()  # No database loaded yet
    CATALOG_LOADED = auto()  # Weighted catalog on screen
    EMPTY_CATALOG = auto()  # Database has no tracks
    RANKED = auto()  # Shuffled order on screen, not saved
    SAVED = auto()  # Playlist written back to the database


class RunthroughAction(Enum):
    LOAD_SUCCESS = auto()
    LOAD_EMPTY = auto()
    SHUFFLE = auto()
    SAVE = auto()
    RESET = auto()


class RunthroughStateMachine:
    """
    Pure FSM Logic.
    Only cares about State Transitions, not UI or storage.
    """

    def __init__(self, initial_state=RunthroughState.IDLE):
        self._state = initial_state

    @property
    def current_state(self) -> RunthroughState:
        return self._state

    def transition(self, action: RunthroughAction) -> bool:
        """
        The Transition Table.
        Returns False (and keeps the current state) for invalid transitions.
        """
        previous = self._state

        match (self._state, action):
            # IDLE -> LOADED or EMPTY
            case (RunthroughState.IDLE, RunthroughAction.LOAD_SUCCESS):
                self._state = RunthroughState.CATALOG_LOADED
            case (RunthroughState.IDLE, RunthroughAction.LOAD_EMPTY):
                self._state = RunthroughState.EMPTY_CATALOG

            # Shuffling is repeatable until the result is saved, and after
            case (
                RunthroughState.CATALOG_LOADED
                | RunthroughState.RANKED
                | RunthroughState.SAVED,
                RunthroughAction.SHUFFLE,
            ):
                self._state = RunthroughState.RANKED

            case (RunthroughState.RANKED, RunthroughAction.SAVE):
                self._state = RunthroughState.SAVED

            case (_, RunthroughAction.RESET):
                self._state = RunthroughState.IDLE

            case _:
                logger.error(f"⛔ INVALID TRANSITION: {self._state.name} + {action.name}")
                return False

        logger.info(f"🔄 FSM: {previous.name} --[{action.name}]--> {self._state.name}")
        return True
