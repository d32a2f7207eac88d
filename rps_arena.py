from game.arena import run_game


if __name__ == "__main__":
    run_game()
