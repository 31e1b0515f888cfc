import base64
import unittest

from domain.errors import InvalidInputError
from infra.llm.composer import OperationKind, compose, normalize_skills
from infra.llm.response_schemas import ANALYSIS_SCHEMA, LEARNING_SCHEMA


class ComposeAnalysisTests(unittest.TestCase):
    def test_long_resume_is_truncated_to_5000_chars(self):
        resume = "X" * 5000 + "Z" * 250
        request = compose(OperationKind.ANALYZE, resume, "Data Scientist")

        self.assertIn("X" * 5000, request.payload)
        self.assertNotIn("Z", request.payload)
        self.assertIn('"Data Scientist"', request.payload)

    def test_analysis_request_carries_schema_and_grounding(self):
        request = compose(OperationKind.ANALYZE, "Python developer, 3 years", "Data Scientist")

        self.assertEqual(request.operation_kind, OperationKind.ANALYZE)
        self.assertIs(request.response_schema, ANALYSIS_SCHEMA)
        self.assertTrue(request.grounded)
        self.assertIn("CareerLift AI", request.instruction)
        self.assertEqual(
            ANALYSIS_SCHEMA["required"], ["resumeScore", "missingSkills", "recommendations", "summary"])

    def test_missing_resume_or_goal_is_invalid_input(self):
        for resume, goal in [("", "Data Scientist"), ("   ", "Data Scientist"),
                             ("Some resume", ""), (None, "Data Scientist"), ("Some resume", None)]:
            with self.subTest(resume=resume, goal=goal):
                with self.assertRaises(InvalidInputError):
                    compose(OperationKind.ANALYZE, resume, goal)


class ComposeLearningTests(unittest.TestCase):
    def test_discovery_joins_skills_and_has_no_schema(self):
        request = compose(OperationKind.DISCOVER, "Data Scientist", ["SQL", " Statistics ", ""])

        self.assertIn('"Data Scientist"', request.payload)
        self.assertIn("SQL, Statistics", request.payload)
        self.assertIsNone(request.response_schema)
        self.assertTrue(request.grounded)

    def test_discovery_accepts_comma_separated_skills(self):
        self.assertEqual(normalize_skills("SQL, Statistics,,Python"), ["SQL", "Statistics", "Python"])
        self.assertEqual(normalize_skills(None), [])

    def test_discovery_requires_role(self):
        with self.assertRaises(InvalidInputError):
            compose(OperationKind.DISCOVER, "  ", ["SQL"])

    def test_structure_uses_learning_schema(self):
        request = compose(OperationKind.STRUCTURE, "1. ML course at Coursera https://c.org")

        self.assertIs(request.response_schema, LEARNING_SCHEMA)
        self.assertFalse(request.grounded)
        self.assertIn("https://c.org", request.payload)

    def test_structure_requires_text(self):
        with self.assertRaises(InvalidInputError):
            compose(OperationKind.STRUCTURE, "")


class ComposeExtractionTests(unittest.TestCase):
    def test_extraction_attaches_inline_bytes(self):
        request = compose(OperationKind.EXTRACT, b"%PDF-1.4 resume", "application/pdf")

        inline = request.attachment.as_inline_data()
        self.assertEqual(inline["mime_type"], "application/pdf")
        self.assertEqual(base64.b64decode(inline["data"]), b"%PDF-1.4 resume")
        self.assertIsNone(request.response_schema)

    def test_extraction_rejects_empty_content(self):
        with self.assertRaises(InvalidInputError):
            compose(OperationKind.EXTRACT, b"", "application/pdf")
