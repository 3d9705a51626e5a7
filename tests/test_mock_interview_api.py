import json
import unittest

from fastapi.testclient import TestClient

from app.api.deps import get_ai_client, get_document_store
from app.core.document_store import DocumentStore
from app.main import app


def question_reply(text: str) -> str:
    return json.dumps(
        {
            "q": text,
            "options": {"A": "list", "B": "tuple", "C": "dict", "D": "set"},
            "correct": "B",
            "explanation": "Tuples are immutable.",
        }
    )


class ScriptedAIClient:
    def __init__(self, *replies):
        self.replies = list(replies)

    def complete(self, prompt: str, *, max_output_tokens: int | None = None) -> str:
        if not self.replies:
            raise RuntimeError("no scripted reply left")
        return self.replies.pop(0)


class MockInterviewApiTests(unittest.TestCase):
    def setUp(self):
        self.store = DocumentStore(":memory:")
        self.ai = ScriptedAIClient()
        app.dependency_overrides[get_document_store] = lambda: self.store
        app.dependency_overrides[get_ai_client] = lambda: self.ai
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.store.close()

    def _start(self, total: int = 3) -> dict:
        response = self.client.post(
            "/api/mock/start",
            json={"clerkId": "u1", "skill": "python", "totalQuestions": total},
        )
        self.assertEqual(response.status_code, 200)
        return response.json()

    def test_full_interview_flow(self):
        self.ai.replies = [
            question_reply("Which type is immutable?"),
            question_reply("Q2"),
            "Tuples cannot be changed after creation.",
            json.dumps(
                {
                    "accuracy": 50,
                    "strengths": ["Basics"],
                    "weaknesses": ["Mutability"],
                    "recommendations": ["Review tuples"],
                    "readinessScore": 60,
                }
            ),
        ]
        started = self._start(total=2)
        self.assertEqual(started["currentIndex"], 0)
        self.assertEqual(started["totalQuestions"], 2)
        self.assertEqual(set(started["question"].keys()), {"qId", "question", "options"})
        self.assertEqual(len(started["question"]["qId"]), 8)
        session_id = started["sessionId"]

        answer = self.client.post(
            "/api/mock/answer",
            json={"sessionId": session_id, "qId": started["question"]["qId"], "selectedOption": "B"},
        )
        self.assertEqual(answer.status_code, 200)
        self.assertEqual(
            answer.json(),
            {"correct": True, "explanation": "Tuples are immutable.", "improvementTip": None},
        )

        nxt = self.client.get(f"/api/mock/next/{session_id}")
        self.assertEqual(nxt.status_code, 200)
        self.assertEqual(nxt.json()["currentIndex"], 1)
        self.assertEqual(nxt.json()["question"]["question"], "Q2")

        wrong = self.client.post(
            "/api/mock/answer",
            json={"sessionId": session_id, "qId": nxt.json()["question"]["qId"], "selectedOption": "A"},
        )
        self.assertEqual(wrong.status_code, 200)
        self.assertFalse(wrong.json()["correct"])
        self.assertEqual(wrong.json()["improvementTip"], "Tuples cannot be changed after creation.")

        finished = self.client.post("/api/mock/finish", json={"sessionId": session_id})
        self.assertEqual(finished.status_code, 200)
        body = finished.json()
        self.assertTrue(body["reportId"])
        self.assertEqual(body["score"], 1)
        self.assertEqual(body["total"], 2)
        self.assertEqual(body["report"]["readinessScore"], 60)
        self.assertEqual(body["report"]["recommendations"], ["Review tuples"])

        after = self.client.get(f"/api/mock/next/{session_id}")
        self.assertEqual(after.status_code, 400)
        self.assertEqual(after.json(), {"message": "Session finished"})

    def test_start_requires_clerk_and_skill(self):
        response = self.client.post("/api/mock/start", json={"clerkId": "u1"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "clerkId and skill required"})

    def test_start_rejects_invalid_total(self):
        response = self.client.post(
            "/api/mock/start",
            json={"clerkId": "u1", "skill": "python", "totalQuestions": 0},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("message", response.json())

    def test_start_with_malformed_model_output(self):
        self.ai.replies = ["The model is overloaded, please retry later."]
        response = self.client.post("/api/mock/start", json={"clerkId": "u1", "skill": "python"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"message": "Failed to start session"})

    def test_model_failure_on_start(self):
        response = self.client.post("/api/mock/start", json={"clerkId": "u1", "skill": "python"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"message": "Failed to start session"})

    def test_unknown_session(self):
        response = self.client.get("/api/mock/next/does-not-exist")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"message": "Session not found"})

        response = self.client.post("/api/mock/finish", json={"sessionId": "does-not-exist"})
        self.assertEqual(response.status_code, 404)

    def test_answer_requires_ids(self):
        response = self.client.post("/api/mock/answer", json={"sessionId": "abc"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "sessionId and qId required"})

    def test_answer_unknown_question(self):
        self.ai.replies = [question_reply("Q1")]
        started = self._start()
        response = self.client.post(
            "/api/mock/answer",
            json={"sessionId": started["sessionId"], "qId": "missing1", "selectedOption": "B"},
        )
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"message": "Question not found"})

    def test_finish_requires_session_id(self):
        response = self.client.post("/api/mock/finish", json={})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "sessionId required"})


if __name__ == "__main__":
    unittest.main()
