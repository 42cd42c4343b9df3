import random

import pygame

from tictactoe.agents import AgentKind, make_agent
from tictactoe.position import BOARD_CELLS, Position, cell_mask

# colors
BG_COLOR = (245, 222, 179)  # wheat
BOARD_COLOR = (139, 90, 43)  # saddle brown
CELL_COLOR = (101, 67, 33)  # dark brown
HOVER_COLOR = (140, 100, 60)
LAST_MOVE_COLOR = (50, 205, 50)  # lime green
TEXT_COLOR = (255, 255, 255)
X_COLOR = (70, 130, 180)  # steel blue
O_COLOR = (178, 34, 34)  # firebrick

# layout constants
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 560
CELL_SIZE = 120
CELL_GAP = 10
BOARD_TOP = 80
BOARD_LEFT = (WINDOW_WIDTH - 3 * CELL_SIZE - 2 * CELL_GAP) // 2


def cell_rects() -> dict[int, pygame.Rect]:
    """Screen rectangle of every cell, for drawing and click detection."""
    rects: dict[int, pygame.Rect] = {}
    for cell in range(BOARD_CELLS):
        row, col = divmod(cell, 3)
        x = BOARD_LEFT + col * (CELL_SIZE + CELL_GAP)
        y = BOARD_TOP + row * (CELL_SIZE + CELL_GAP)
        rects[cell] = pygame.Rect(x, y, CELL_SIZE, CELL_SIZE)
    return rects


def draw_mark(screen: pygame.Surface, rect: pygame.Rect, mark: str) -> None:
    inset = rect.inflate(-36, -36)
    if mark == "X":
        pygame.draw.line(screen, X_COLOR, inset.topleft, inset.bottomright, 10)
        pygame.draw.line(screen, X_COLOR, inset.topright, inset.bottomleft, 10)
    else:
        pygame.draw.circle(screen, O_COLOR, rect.center, inset.width // 2, 9)


def draw_board(
    screen: pygame.Surface,
    font: pygame.font.Font,
    position: Position,
    last_move: int | None,
    hover_cell: int | None = None,
) -> None:
    """Draw the grid, the marks and the side to move."""
    screen.fill(BG_COLOR)

    board_size = 3 * CELL_SIZE + 4 * CELL_GAP
    board_rect = pygame.Rect(BOARD_LEFT - CELL_GAP, BOARD_TOP - CELL_GAP, board_size, board_size)
    pygame.draw.rect(screen, BOARD_COLOR, board_rect, border_radius=20)

    legal = position.legal_moves()
    for cell, rect in cell_rects().items():
        if last_move is not None and cell_mask(cell) == last_move:
            color = LAST_MOVE_COLOR
        elif cell == hover_cell and legal & cell_mask(cell):
            color = HOVER_COLOR
        else:
            color = CELL_COLOR
        pygame.draw.rect(screen, color, rect, border_radius=12)

        mark = position.cell(cell)
        if mark is not None:
            draw_mark(screen, rect, mark)

    player = position.current_player()
    turn_text = font.render(f"Player {'XO'[player]}'s turn", True, (X_COLOR, O_COLOR)[player])
    screen.blit(turn_text, (WINDOW_WIDTH // 2 - turn_text.get_width() // 2, 25))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, position: Position) -> None:
    """Draw game over overlay."""
    overlay = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 180))
    screen.blit(overlay, (0, 0))

    if position.opponent_winning():
        winner = 1 - position.current_player()
        result_text = f"Player {'XO'[winner]} Wins!"
        color = (X_COLOR, O_COLOR)[winner]
    else:
        result_text = "Draw!"
        color = TEXT_COLOR

    big_font = pygame.font.Font(None, 72)
    text = big_font.render(result_text, True, color)
    screen.blit(text, (WINDOW_WIDTH // 2 - text.get_width() // 2, WINDOW_HEIGHT // 2 - 50))

    restart_text = font.render("Press R to restart or Q to quit", True, TEXT_COLOR)
    screen.blit(
        restart_text, (WINDOW_WIDTH // 2 - restart_text.get_width() // 2, WINDOW_HEIGHT // 2 + 20)
    )


def run_gui(
    x_type: AgentKind = "human",
    o_type: AgentKind = "perfect",
    seed: int | None = None,
    initial_state: Position | None = None,
) -> None:
    """Run the pygame GUI."""
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("Tic-tac-toe")
    font = pygame.font.Font(None, 36)
    clock = pygame.time.Clock()

    rng = random.Random(seed)
    player_types = [x_type, o_type]
    # humans click on the board instead of using the terminal agent
    agents = [None if kind == "human" else make_agent(kind, rng) for kind in player_types]

    start = initial_state.copy() if initial_state is not None else Position()
    position = start.copy()
    last_move: int | None = None

    running = True
    while running:
        clock.tick(60)
        game_over = position.full() or position.opponent_winning()
        hover_cell: int | None = None
        mouse_pos = pygame.mouse.get_pos()
        for cell, rect in cell_rects().items():
            if rect.collidepoint(mouse_pos):
                hover_cell = cell

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_q:
                    running = False
                elif event.key == pygame.K_r:
                    position = start.copy()
                    last_move = None
                    game_over = position.full() or position.opponent_winning()
                    for agent in agents:
                        if agent is not None:
                            agent.reset()

            if event.type == pygame.MOUSEBUTTONDOWN and not game_over:
                if agents[position.current_player()] is None and hover_cell is not None:
                    move = cell_mask(hover_cell)
                    if position.legal_moves() & move:
                        position.play(move)
                        last_move = move
                        game_over = position.full() or position.opponent_winning()

        # AI move
        agent = agents[position.current_player()]
        if running and not game_over and agent is not None:
            pygame.display.set_caption("Tic-tac-toe - AI thinking...")
            draw_board(screen, font, position, last_move)
            pygame.display.flip()

            move = agent.select_move(position)
            position.play(move)
            last_move = move
            game_over = position.full() or position.opponent_winning()
            pygame.display.set_caption("Tic-tac-toe")

        # draw
        draw_board(screen, font, position, last_move, hover_cell)
        if game_over:
            draw_game_over(screen, font, position)

        pygame.display.flip()

    pygame.quit()
