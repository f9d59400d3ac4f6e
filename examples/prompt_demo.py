"""Example usage of the line and password prompts."""

from termkit import Prompts


def main() -> None:
    """Ask for a name and a few passwords with different masks."""
    name = Prompts.input("Enter your name: ")
    print(f"Hello {name}")

    secret = Prompts.password("Enter Password Here: ")
    print(f"You have entered password: {secret}")

    # Custom masking symbol
    secret = Prompts.password("Enter Password Here[-]: ", {"ast": "-"})
    print(f"You have entered password: {secret}")

    # No echo at all
    secret = Prompts.password("Enter Password Here[ ]: ", {"ast": False})
    print(f"You have entered password: {secret}")

    # Colored mask
    secret = Prompts.password("Enter Password Here[*]: ", {"color": "cyan"})
    print(f"You have entered password: {secret}")


if __name__ == "__main__":
    main()
