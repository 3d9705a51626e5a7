import unittest
import zlib
from unittest.mock import patch

from fastapi.testclient import TestClient

from app.main import app


class ResumeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.resume_text = (
            "Nikhil Sihare nikhil@example.com 9876543210 "
            "Skills: React, Node, MongoDB, Docker, Python "
            "Experience Software Developer Intern at Acme Company "
            "Projects Built and deployed a chat app "
            "Education Bachelor of Technology, XYZ University, CGPA 8.2 "
            "Achievements Hackathon winner "
        )

    def test_upload_returns_analysis(self):
        with patch("app.services.resume_service.extract_pdf_text", return_value=self.resume_text) as extract:
            response = self.client.post(
                "/api/resume/upload",
                files={"resume": ("resume.pdf", b"%PDF-1.4 fake", "application/pdf")},
                data={"jd": "Looking for React, Docker and Kubernetes experience"},
            )
        extract.assert_called_once_with(b"%PDF-1.4 fake")
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["message"], "Resume analyzed successfully!")
        self.assertEqual(body["name"], "Nikhil Sihare")
        self.assertEqual(body["email"], "nikhil@example.com")
        self.assertEqual(body["phone"], "9876543210")
        for skill in ("react", "node", "mongodb", "docker", "python"):
            self.assertIn(skill, body["skills"])
        self.assertIn("kubernetes", body["jdSkills"])
        self.assertEqual(body["missingSkills"], ["kubernetes"])
        self.assertIsInstance(body["jdMatchScore"], int)
        self.assertTrue(0 <= body["normalizedScore"] <= 100)
        self.assertEqual(body["scoreBreakdown"]["contact"], 10)
        self.assertEqual(body["scoreBreakdown"]["jdMatch"], body["jdMatchScore"])
        self.assertEqual(body["text"], self.resume_text.strip())

    def test_upload_without_jd(self):
        with patch("app.services.resume_service.extract_pdf_text", return_value=self.resume_text):
            response = self.client.post(
                "/api/resume/upload",
                files={"resume": ("resume.pdf", b"%PDF-1.4 fake", "application/pdf")},
            )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["jdSkills"], [])
        self.assertEqual(body["jdMatchScore"], 0)

    def test_unparseable_pdf_returns_500(self):
        response = self.client.post(
            "/api/resume/upload",
            files={"resume": ("resume.pdf", b"this is not a pdf", "application/pdf")},
        )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"message": "PDF parsing failed"})

    def test_low_level_decoder_error_is_a_parse_failure(self):
        with patch("app.parsing.pdf_text.PdfReader", side_effect=zlib.error("invalid stored block lengths")):
            response = self.client.post(
                "/api/resume/upload",
                files={"resume": ("resume.pdf", b"%PDF-1.4 broken", "application/pdf")},
            )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"message": "PDF parsing failed"})

    def test_missing_file_returns_400(self):
        response = self.client.post("/api/resume/upload", data={"jd": "python"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "resume file is required"})


if __name__ == "__main__":
    unittest.main()
