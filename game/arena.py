# game/arena.py
import pygame

from config import WIN_W, WIN_H, HISTORY_LINES, FPS, COUNTDOWN_WORDS, SPEAK
from game.narrator import Narrator, beat_line, result_lines
from game.round import NO_GESTURE, RoundMachine, RoundPhase
from game.rules import OUTCOME_TEXT, NO_GESTURE_TEXT
from game.scheduler import Scheduler
from gesture.types import GestureCell, Outcome
from gesture.worker import KeypointWorker

OUTCOME_COLOR = {
    Outcome.WIN: (120, 230, 150),
    Outcome.LOSE: (255, 120, 120),
    Outcome.DRAW: (230, 220, 120),
}
LOG_TEXT = {Outcome.WIN: "You Win", Outcome.LOSE: "AI Wins", Outcome.DRAW: "Draw"}


class ArenaView:
    """What the window shows (and the narrator says); fed by RoundMachine hooks."""

    def __init__(self, narrator=None):
        self.narrator = narrator
        self.countdown = ""
        self.result = ""
        self.result_color = (200, 200, 200)
        self.match = None

    def on_beat(self, index: int):
        self.countdown = COUNTDOWN_WORDS[index]
        self.result = ""
        if self.narrator:
            self.narrator.say(beat_line(index))

    def on_resolved(self, snapshot, record):
        self.countdown = ""
        self.match = snapshot
        if record == NO_GESTURE:
            self.result = NO_GESTURE_TEXT
            self.result_color = (200, 200, 200)
        else:
            self.result = f"{record.human.value} vs {record.opponent.value}: {OUTCOME_TEXT[record.outcome]}"
            self.result_color = OUTCOME_COLOR[record.outcome]
        if self.narrator:
            self.narrator.say(*result_lines(record))

    def on_reset(self):
        self.countdown = ""
        self.result = ""
        self.match = None


def draw_text(screen, font, text, pos, color=(220, 220, 220)):
    screen.blit(font.render(text, True, color), pos)


def run_game():
    pygame.init()
    screen = pygame.display.set_mode((WIN_W, WIN_H))
    pygame.display.set_caption("RPS Arena - MediaPipe Hands")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Consolas", 18)
    big = pygame.font.SysFont("Consolas", 56, bold=True)

    cell = GestureCell()
    worker = KeypointWorker(cell)
    worker.start()
    print("[Main] KeypointWorker started:", worker.is_alive())

    narrator = None
    if SPEAK:
        narrator = Narrator()
        narrator.start()

    def shutdown():
        worker.stop()
        if narrator:
            narrator.stop()

    view = ArenaView(narrator)
    scheduler = Scheduler()
    machine = RoundMachine(
        cell, scheduler,
        on_beat=view.on_beat,
        on_resolved=view.on_resolved,
        on_reset=view.on_reset,
    )

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                shutdown()
                return
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    shutdown()
                    return
                if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    machine.start_round()
                if event.key == pygame.K_r:
                    machine.reset()

        scheduler.run_due()

        gesture, g_label, g_seen, g_cam = cell.status()
        match = view.match or machine.state

        # Render
        screen.fill((12, 12, 14))
        draw_text(screen, font, f"You {match.human_score} : {match.opponent_score} AI", (8, 6), (230, 230, 230))
        draw_text(screen, font, f"Round {match.round_number}", (WIN_W - 120, 6), (200, 200, 200))
        draw_text(screen, font, f"Gesture: {g_label}", (8, 28), (200, 200, 200))
        draw_text(screen, font, f"Hand: {'YES' if g_seen else 'NO'} | {g_cam}", (8, 50), (120, 120, 120))

        if machine.phase is RoundPhase.COUNTDOWN and view.countdown:
            surf = big.render(view.countdown, True, (255, 255, 255))
            screen.blit(surf, surf.get_rect(center=(WIN_W // 2, 130)))
        elif view.result:
            draw_text(screen, font, view.result, (8, 110), view.result_color)
        else:
            draw_text(screen, font, "SPACE to play | R to reset | ESC to quit", (8, 110), (180, 180, 180))

        y = 190
        for record in match.history[:HISTORY_LINES]:
            line = f"R{record.round_number}  {record.human.value} vs {record.opponent.value}  {LOG_TEXT[record.outcome]}"
            draw_text(screen, font, line, (8, y), OUTCOME_COLOR[record.outcome])
            y += 24

        pygame.display.flip()
        clock.tick(FPS)
