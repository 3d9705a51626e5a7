import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.resume_extract import (  # noqa: E402
    extract_email,
    extract_jd_keywords,
    extract_name,
    extract_phone,
    extract_skills,
    finalize_skills,
    normalize_text,
)


class NormalizeTextTests(unittest.TestCase):
    def test_collapses_whitespace_dashes_and_strips_non_ascii(self):
        self.assertEqual(normalize_text("Café   -- Bar\n\n\nBaz "), "Caf Bar Baz")

    def test_empty_input(self):
        self.assertEqual(normalize_text(""), "")


class FieldExtractionTests(unittest.TestCase):
    def setUp(self):
        self.text = normalize_text(
            "Nikhil Sihare\nnikhil@example.com\n9876543210\nSkills: React, Node, MongoDB"
        )

    def test_contact_fields_from_sample_resume(self):
        self.assertEqual(extract_name(self.text), "Nikhil Sihare")
        self.assertEqual(extract_email(self.text), "nikhil@example.com")
        self.assertEqual(extract_phone(self.text), "9876543210")

    def test_skills_from_sample_resume(self):
        skills = extract_skills(self.text)
        for expected in ("react", "node", "mongodb"):
            self.assertIn(expected, skills)
        self.assertEqual(skills, ["c", "mongodb", "nikhil", "node", "react", "sihare"])

    def test_phone_with_country_prefix(self):
        self.assertEqual(extract_phone("Call +91 9876543210 now"), "+91 9876543210")
        self.assertEqual(extract_phone("+91-7012345678"), "+91-7012345678")

    def test_phone_rejects_numbers_not_starting_six_to_nine(self):
        self.assertIsNone(extract_phone("Office 1234567890"))

    def test_email_missing(self):
        self.assertIsNone(extract_email("no contact details here"))

    def test_name_splits_camel_case(self):
        self.assertEqual(extract_name("NikhilSihare Resume"), "Nikhil Sihare")

    def test_name_requires_two_capitalized_words(self):
        self.assertIsNone(extract_name("resume of nikhil"))
        self.assertIsNone(extract_name("Nikhil"))

    def test_name_uses_first_line_only(self):
        self.assertIsNone(extract_name("nikhil\nNikhil Sihare"))


class SkillExtractionTests(unittest.TestCase):
    def test_js_suffix_is_stripped(self):
        skills = extract_skills("Skills React.js Express.js")
        self.assertIn("react", skills)
        self.assertIn("express", skills)
        self.assertNotIn("react.js", skills)

    def test_long_token_dropped_before_js_strip(self):
        self.assertEqual(extract_skills("Handlebars.js"), [])

    def test_number_bearing_tokens_rejected(self):
        skills = extract_skills("Python3 Vue")
        self.assertNotIn("python3", skills)
        self.assertIn("python", skills)
        self.assertIn("vue", skills)

    def test_stopwords_removed(self):
        skills = extract_skills("Experience Education Bhopal Jan")
        for word in ("experience", "education", "bhopal", "jan"):
            self.assertNotIn(word, skills)

    def test_finalize_skills_is_idempotent(self):
        raw = ["react", "aws", "react", "c++", "aws"]
        once = finalize_skills(raw)
        self.assertEqual(once, ["aws", "c++", "react"])
        self.assertEqual(finalize_skills(once), once)

    def test_jd_keywords_use_vocabulary(self):
        jd = "Looking for a Python developer with Docker and AWS experience."
        keywords = extract_jd_keywords(jd)
        self.assertIn("python", keywords)
        self.assertIn("docker", keywords)
        self.assertIn("aws", keywords)
        self.assertNotIn("react", keywords)

    def test_jd_keywords_empty_text(self):
        self.assertEqual(extract_jd_keywords(""), [])


if __name__ == "__main__":
    unittest.main()
