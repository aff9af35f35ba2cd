def _rejects_left_context(char: str) -> bool:
    """Whether the character before a shortlink forbids one from starting.

    An empty string stands for start of text and never rejects.
    """
    return char.isalnum() or char == "/"
