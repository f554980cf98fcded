def emit(line: str) -> None:
    print(line)
