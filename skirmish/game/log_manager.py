"""
Log management system for battle messages and debugging.

This module provides centralized logging with categorization, filtering and
bounded storage. It listens on the event bus and turns battle events into
readable lines; the battle manager itself never formats output.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, TYPE_CHECKING

from ..core.data import BattleOutcome, LogCategory, LogLevel, LOG_CATEGORY_TAGS, SIDE_NAMES
from ..core.events import (
    BattleEnded,
    BattleStarted,
    CombatantDefeated,
    DebugMessage,
    EventType,
    LogMessage,
    RoundResolved,
)
from .entities.combatant import describe_health

if TYPE_CHECKING:
    from ..core.events import EventManager, BattleEvent


@dataclass
class LogEntry:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    level: LogLevel = LogLevel.INFO
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{LOG_CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogManager:
    """Collects battle log messages from the event bus."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event manager for event-driven logging (required)
            max_messages: Maximum number of messages to store in the buffer
            default_level: Minimum level returned by get_messages()
        """
        self.messages: deque[LogEntry] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)
        self.event_manager = event_manager

        self._setup_event_subscriptions()
        event_manager.set_error_handler(self.error)

    def _subscriptions(self):
        return (
            (EventType.LOG_MESSAGE, self._handle_log_message_event, "log_message"),
            (EventType.DEBUG_MESSAGE, self._handle_debug_message_event, "debug_message"),
            (EventType.BATTLE_STARTED, self._handle_battle_started, "battle_started"),
            (EventType.ROUND_RESOLVED, self._handle_round_resolved, "round_resolved"),
            (EventType.COMBATANT_DEFEATED, self._handle_combatant_defeated, "combatant_defeated"),
            (EventType.BATTLE_ENDED, self._handle_battle_ended, "battle_ended"),
        )

    def _setup_event_subscriptions(self) -> None:
        for event_type, handler, name in self._subscriptions():
            self.event_manager.subscribe(event_type, handler, subscriber_name=f"LogManager.{name}")

    def detach(self) -> None:
        """Stop listening on the event bus. Stored messages are kept."""
        for event_type, handler, _ in self._subscriptions():
            self.event_manager.unsubscribe(event_type, handler)
        if self.event_manager.error_handler == self.error:
            self.event_manager.set_error_handler(None)

    def _handle_log_message_event(self, event: "BattleEvent") -> None:
        if isinstance(event, LogMessage):
            self.log(event.message, event.category, event.level)

    def _handle_debug_message_event(self, event: "BattleEvent") -> None:
        if isinstance(event, DebugMessage):
            self.log(f"[{event.source}] {event.message}", LogCategory.DEBUG, LogLevel.DEBUG)

    def _handle_battle_started(self, event: "BattleEvent") -> None:
        if isinstance(event, BattleStarted):
            self.battle(f"{describe_health(event.player)} faces {describe_health(event.enemy)}")

    def _handle_round_resolved(self, event: "BattleEvent") -> None:
        if not isinstance(event, RoundResolved):
            return
        fight_round = event.fight_round
        self.battle(
            f"Round {fight_round.round_number}: "
            f"{fight_round.current_player_status.character_class} [{fight_round.player_fight_strategy}] "
            f"takes {fight_round.player_damage_suffered:g}, "
            f"{fight_round.current_enemy_status.character_class} [{fight_round.enemy_fight_strategy}] "
            f"takes {fight_round.enemy_damage_suffered:g} -> "
            f"{describe_health(fight_round.current_player_status)} vs "
            f"{describe_health(fight_round.current_enemy_status)}"
        )

    def _handle_combatant_defeated(self, event: "BattleEvent") -> None:
        if isinstance(event, CombatantDefeated):
            self.battle(f"{SIDE_NAMES[event.side]} {event.combatant.character_class} is defeated")

    def _handle_battle_ended(self, event: "BattleEvent") -> None:
        if not isinstance(event, BattleEnded):
            return
        if event.outcome == BattleOutcome.DRAW:
            self.battle(f"Battle ended in a draw after {event.round_number} rounds")
        else:
            self.battle(f"{describe_health(event.winner)} wins after {event.round_number} rounds")

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM, level: Optional[LogLevel] = None) -> None:
        """Add a message to the log.

        Args:
            text: The message text
            category: The category of the message
            level: Message level (derived from the category when omitted)
        """
        if level is None:
            level = self._default_level_for(category)
        self.messages.append(LogEntry(text=text, category=category, level=level))

    @staticmethod
    def _default_level_for(category: LogCategory) -> LogLevel:
        if category == LogCategory.DEBUG:
            return LogLevel.DEBUG
        if category == LogCategory.WARNING:
            return LogLevel.WARNING
        if category == LogCategory.ERROR:
            return LogLevel.ERROR
        return LogLevel.INFO

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def battle(self, text: str) -> None:
        self.log(text, LogCategory.BATTLE)

    def strategy(self, text: str) -> None:
        self.log(text, LogCategory.STRATEGY)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogEntry]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all enabled)

        Returns:
            List of recent messages, oldest first
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = [msg for msg in self.messages
                        if msg.category in self.enabled_categories
                        and msg.level.value >= self.log_level.value]

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def get_formatted_messages(self, count: Optional[int] = None) -> list[str]:
        """Messages formatted for display with category tags."""
        return [msg.format() for msg in self.get_messages(count)]

    def clear(self) -> None:
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        """Check if debug messages are currently visible."""
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        if self.is_debug_enabled():
            self.disable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.INFO)
        else:
            self.enable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.DEBUG)

    def save_log_to_file(self, log_dir: str = "logs") -> Optional[str]:
        """Save all messages, ignoring filters, to a timestamped log file.

        Args:
            log_dir: Directory to write into (created if missing)

        Returns:
            Path of the written file, or None if it could not be written
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = os.path.join(log_dir, f"battle_{timestamp}.log")

        try:
            os.makedirs(log_dir, exist_ok=True)
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Skirmish - Battle Log\n")
                f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                for msg in self.messages:
                    timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                    f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return None

        self.system(f"Battle log saved to {filepath}")
        return filepath
