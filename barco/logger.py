"""Markdown logger for gameplay events (hits, pickups, level-ups, game over)."""

import datetime


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Barco Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Game Events\n\n")
                f.write("| Timestamp | Event | Details |\n")
                f.write("|-----------|-------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def log_event(self, event: str, details: str = "") -> None:
        """
        Append one event row.

        Parameters
        ----------
        event : str
            Short event name, e.g. ``HIT``
        details : str, optional
            Free-form details
        """
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds

            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {details} |\n")

        except OSError as e:
            print(f"Failed to log {event}: {e}")

    def log_session_start(self, lives: int) -> None:
        self.log_event("START", f"New session with {lives} lives")

    def log_hit(self, lives: int) -> None:
        self.log_event("HIT", f"Cannonball hit the boat - {lives} lives left")

    def log_pickup(self, lives: int) -> None:
        self.log_event("PICKUP", f"Driftwood collected - {lives} lives")

    def log_level_up(self, level: int) -> None:
        self.log_event("LEVEL UP", f"Reached level {level}")

    def log_game_over(self, score: int, level: int) -> None:
        self.log_event("GAME OVER", f"Final score {score} at level {level}")
