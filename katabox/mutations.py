"""A word game where players take turns changing one letter of a word."""

_WORD_LENGTH = 4


def _playable(words, word):
    return [w for w in words if w != word and len(set(w)) == _WORD_LENGTH]


def _differences(a, b):
    a = a[:_WORD_LENGTH].ljust(_WORD_LENGTH, "\0")
    b = b[:_WORD_LENGTH].ljust(_WORD_LENGTH, "\0")
    return sum(x != y for x, y in zip(a, b))


def _next_word(memory, word):
    return next((w for w in memory if _differences(w, word) == 1), None)


def mutations(alice, bob, word, first):
    """Play the game and return 0 if Alice wins, 1 if Bob wins, -1 if nobody does.

    ``first`` is 0 when Alice starts and anything else when Bob does. Only
    words of four distinct letters count, and every word is used once.
    """
    memories = (_playable(alice, word), _playable(bob, word))
    success = [False, False]
    player = 0 if first == 0 else 1
    turns = 0
    while True:
        found = _next_word(memories[player], word)
        if found is not None:
            word = found
            for memory in memories:
                memory[:] = [w for w in memory if w != word]
        success[player] = found is not None
        player = 1 - player
        turns += 1
        if turns >= 2 and not all(success):
            break
    if not any(success):
        return -1
    return 0 if success[0] else 1