import unittest

from app.ai.json_extract import extract_json
from app.core.errors import ModelResponseError


class ExtractJsonTests(unittest.TestCase):
    def test_object_inside_markdown_fence(self):
        text = 'Here you go:\n```json\n{"q": "What?", "options": {"A": "x"}}\n```\nGood luck!'
        self.assertEqual(extract_json(text), {"q": "What?", "options": {"A": "x"}})

    def test_plain_object(self):
        self.assertEqual(extract_json('{"accuracy": 80}'), {"accuracy": 80})

    def test_no_braces_is_an_error(self):
        with self.assertRaises(ModelResponseError):
            extract_json("Sorry, I can't help with that.")

    def test_non_object_json_is_an_error(self):
        with self.assertRaises(ModelResponseError):
            extract_json("[1, 2, 3]")

    def test_span_runs_from_first_to_last_brace(self):
        # Two separate objects make the greedy span invalid JSON.
        with self.assertRaises(ModelResponseError):
            extract_json('{"a": 1} and also {"b": 2}')

    def test_empty_text(self):
        with self.assertRaises(ModelResponseError):
            extract_json("")


if __name__ == "__main__":
    unittest.main()
