import os


_YES = ("y", "yes")
_NO = ("n", "no")


def file_exists(path) -> bool:
    # A dangling symlink still occupies the name.
    return os.path.lexists(path)


def confirm(prompt: str, default: bool = False, input_func=None) -> bool:
    """Ask a yes/no question on the terminal; an empty answer or EOF picks ``default``."""
    input_func = input_func or input
    hint = "y" if default else "n"
    while True:
        try:
            answer = input_func(f"{prompt} (y/n) [{hint}]: ").strip().lower()
        except EOFError:
            return default
        if not answer:
            return default
        if answer in _YES:
            return True
        if answer in _NO:
            return False
        print("Please answer y or n.")
