from colorama import Fore, Style


def __coloured(text: str, colour) -> str:
    return f"{colour}{text}{Style.RESET_ALL}"


def error(text: str) -> str:
    return __coloured(text, Fore.RED)
