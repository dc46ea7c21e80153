"""Fuzzing tests for the tokenizer, parser and rewrite engine with random inputs."""

import random
import unittest

from muxt_math.interpreter import evaluate, simplify
from muxt_math.parser import parse_text
from muxt_math.types import MathError

ALPHABET = "0123456789xy+-*/^()= "


def random_tree_text(rng, depth=0):
    """Build a random well-formed expression over x, y and small integers."""
    if depth > 3 or rng.random() < 0.3:
        return rng.choice(["0", "1", "2", "3", "10", "x", "y"])
    left = random_tree_text(rng, depth + 1)
    right = random_tree_text(rng, depth + 1)
    text = f"{left} {rng.choice('+-*/^')} {right}"
    return f"({text})" if rng.random() < 0.5 else text


class TestParserFuzzing(unittest.TestCase):
    """Fuzz test parser with random inputs."""

    def test_random_strings(self):
        """Random strings either parse or raise a MathError, nothing else."""
        rng = random.Random(1234)
        for _ in range(300):
            text = "".join(rng.choices(ALPHABET, k=rng.randint(1, 30)))
            try:
                parse_text(text)
            except MathError:
                pass

    def test_malformed_expressions(self):
        for text in ["(((", ")))", "x++y", "x^", "*/x", "", "   ", "()()", "=="]:
            with self.assertRaises(MathError):
                parse_text(text)


class TestRewriteFuzzing(unittest.TestCase):
    def test_simplify_is_idempotent(self):
        rng = random.Random(42)
        for _ in range(300):
            text = random_tree_text(rng)
            once = simplify(parse_text(text).root)
            self.assertEqual(simplify(once), once, text)

    def test_evaluate_only_raises_math_errors(self):
        rng = random.Random(7)
        for _ in range(300):
            text = random_tree_text(rng).replace("x", "2").replace("y", "3")
            value = evaluate(parse_text(text).root)
            self.assertIsInstance(value, float)


if __name__ == "__main__":
    unittest.main()
