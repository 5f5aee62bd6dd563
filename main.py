from math import ceil
import logging
import sys

import pygame

from score_tracker import ScoreTracker

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Window
SCREEN_WIDTH = 540
SCREEN_HEIGHT = 960
BACKGROUND_COLOR = (20, 20, 20)
PANEL_COLOR = (169, 169, 169)
TEXT_COLOR = (255, 255, 255)
BONUS_COLOR = (255, 200, 0)

DEFAULT_FPS = 30
GAME_DURATION = 60.0  # seconds per session

# Game states
WAITING_FOR_START = "waiting_for_start"
PLAYING_GAME = "playing_game"
PAUSED = "paused"
GAME_OVER = "game_over"

# Number keys pick up a bonus of that size; B picks up the default 2x bonus
BONUS_KEYS = {
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
}


def parse_fps(argv):
    """Read a --fps=<n> switch, falling back to DEFAULT_FPS."""
    for arg in argv:
        if arg.startswith("--fps="):
            try:
                fps = int(arg.split("=", 1)[1])
            except ValueError:
                logger.warning(f"Ignoring invalid frame rate: {arg}")
                continue
            if fps > 0:
                return fps
            logger.warning(f"Ignoring non-positive frame rate: {arg}")
    return DEFAULT_FPS


def format_multiplier(tracker):
    if not tracker.has_multiplier:
        return ""
    remaining = max(tracker.multiplier_remaining, 0.0)
    return f"x{tracker.multiplier} ({remaining:.1f}s)"


def hud_lines(tracker, game_state, time_left):
    """
    Build the text shown in the scoreboard panel.

    Args:
        tracker: ScoreTracker being displayed
        game_state: One of the game state constants
        time_left: Seconds left in the current session

    Returns:
        List of strings, top to bottom
    """
    if game_state == WAITING_FOR_START:
        return ["Press SPACE", "to start the game!"]

    if game_state == GAME_OVER:
        return [f"Final Score: {tracker.score}", "Press SPACE to play again"]

    lines = [f"Score: {tracker.score}", f"Time: {ceil(time_left)}"]
    bonus = format_multiplier(tracker)
    if bonus:
        lines.append(f"Bonus {bonus}")
    if game_state == PAUSED:
        lines.append("PAUSED")
    return lines


def draw_ui_area(screen, lines):
    """Draw the scoreboard panel in the middle of the screen"""
    screen_width, screen_height = screen.get_size()
    side_padding = 60
    panel_width = screen_width - 2 * side_padding
    panel_height = int(screen_height * 0.3)
    panel = pygame.Surface((panel_width, panel_height), pygame.SRCALPHA)
    pygame.draw.rect(panel, PANEL_COLOR, panel.get_rect(), border_radius=15)

    font = pygame.font.Font(None, 48)
    line_height = 50
    top = panel_height // 2 - (len(lines) - 1) * line_height // 2
    for i, line in enumerate(lines):
        color = BONUS_COLOR if line.startswith("Bonus") else TEXT_COLOR
        text = font.render(line, True, color)
        text_rect = text.get_rect(center=(panel_width // 2, top + i * line_height))
        panel.blit(text, text_rect)

    screen.blit(panel, (side_padding, (screen_height - panel_height) // 2))


def start_session(tracker):
    tracker.reset()
    tracker.set_active(True)
    logger.info("Game started")
    return PLAYING_GAME


def end_session(tracker):
    tracker.set_active(False)
    logger.info(f"Game over, final score: {tracker.score}")
    return GAME_OVER


def handle_key(key, game_state, tracker):
    """
    Apply a key press to the tracker and return the next game state.
    """
    if key == pygame.K_SPACE and game_state in (WAITING_FOR_START, GAME_OVER):
        return start_session(tracker)

    if key == pygame.K_p and game_state in (PLAYING_GAME, PAUSED):
        paused = game_state == PLAYING_GAME
        tracker.set_active(not paused)
        logger.info("Game paused" if paused else "Game resumed")
        return PAUSED if paused else PLAYING_GAME

    if game_state == PLAYING_GAME:
        if key == pygame.K_b:
            tracker.set_multiplier()
        elif key in BONUS_KEYS:
            tracker.set_multiplier(BONUS_KEYS[key])

    return game_state


def run_game(fps):
    """Main game loop"""
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("Score Tracker")
    clock = pygame.time.Clock()

    tracker = ScoreTracker()
    game_state = WAITING_FOR_START
    time_left = GAME_DURATION

    running = True
    while running:
        delta_time = clock.tick(fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                running = False
            elif event.type == pygame.KEYDOWN:
                previous_state = game_state
                game_state = handle_key(event.key, game_state, tracker)
                if previous_state in (WAITING_FOR_START, GAME_OVER) and game_state == PLAYING_GAME:
                    time_left = GAME_DURATION

        if game_state == PLAYING_GAME:
            tracker.update(delta_time)
            time_left -= delta_time
            if time_left <= 0:
                time_left = 0.0
                game_state = end_session(tracker)

        screen.fill(BACKGROUND_COLOR)
        draw_ui_area(screen, hud_lines(tracker, game_state, time_left))
        pygame.display.flip()


def main():
    run_game(parse_fps(sys.argv[1:]))


if __name__ == "__main__":
    main()
    pygame.quit()
