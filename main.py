import random
from core.game_engine import interactive_game
from evaluation.simulation import simulate_matches
from strategy import AverageRankPlayer, RandomPlayer
from utils.scoreboard import ScoreboardStore, format_scoreboard


def ask_player_name():
    while True:
        name = input("Enter your name: ").strip()
        if name:
            return name
        print("Please enter a name to start.")


def show_scoreboard(store):
    print("\n--- Scoreboard ---")
    try:
        records = store.fetch_all_records()
    except Exception as e:
        print(f"Could not load scoreboard: {e}")
        return
    print(format_scoreboard(records))


def play(player_name, store):
    game = interactive_game(player_name, scoreboard=store)
    while True:
        game.play_round()
        print("\n1. Play again")
        print("2. Scoreboard")
        print("3. Back to menu")
        choice = input("Choose option (1-3): ").strip()
        if choice == '2':
            show_scoreboard(store)
            if input("\nPlay again? (y/n): ").strip().lower() != 'y':
                return
        elif choice != '1':
            return


def simulate():
    print("\nStrategies:")
    print("1. Average rank (the game's opponent)")
    print("2. Random legal column")
    strategies = {'1': AverageRankPlayer, '2': RandomPlayer}

    first = input("First seat (1-2, default: 2): ").strip() or '2'
    second = input("Second seat (1-2, default: 1): ").strip() or '1'
    try:
        num_rounds = int(input("Number of rounds (default: 200): ") or "200")
    except ValueError:
        num_rounds = 200
    if num_rounds <= 0:
        print("Number of rounds must be positive, using 200.")
        num_rounds = 200
    seed_text = input("Seed (blank for random): ").strip()
    seed = int(seed_text) if seed_text.isdigit() else None

    rng = random.Random(seed)
    seats = []
    for choice in (first, second):
        cls = strategies.get(choice, AverageRankPlayer)
        seats.append(cls(rng) if cls is RandomPlayer else cls())
    simulate_matches(seats[0], seats[1], num_rounds=num_rounds, seed=seed, verbose=True)


def main():
    """Main menu loop"""
    print("=" * 60)
    print("CHINESE POKER - five columns, one deck, one bot")
    print("=" * 60)

    store = ScoreboardStore(verbose=True)
    player_name = ask_player_name()

    while True:
        print("\n1. Play a round")
        print("2. Scoreboard")
        print("3. Simulate bot vs bot")
        print("4. Quit")
        choice = input("\nChoose option (1-4): ").strip()

        if choice == '1':
            play(player_name, store)
        elif choice == '2':
            show_scoreboard(store)
        elif choice == '3':
            simulate()
        elif choice == '4':
            print("Thanks for playing!")
            break
        else:
            print("Invalid choice.")


if __name__ == "__main__":
    main()
