import unittest

import httpx

from domain.errors import InvalidInputError
from domain.services.learning_service import discover_learning_resources
from infra.catalog.recommendations import static_learning_catalog
from infra.llm.client import GeminiClient

from gemini_fakes import GROUNDING, LEARNING_PAYLOAD, ScriptedGemini, envelope, json_envelope, unavailable

NOTES = "Machine Learning Specialization by Coursera https://www.coursera.org/... Kaggle competitions."


class DiscoverLearningResourcesTests(unittest.IsolatedAsyncioTestCase):
    async def test_discovery_then_structure(self):
        fake = ScriptedGemini([envelope(NOTES, GROUNDING), json_envelope(LEARNING_PAYLOAD)])
        result = await discover_learning_resources("Data Scientist", ["SQL", "Statistics"], client=fake.client())

        self.assertFalse(result.fallback)
        self.assertEqual([c.title for c in result.courses], ["Machine Learning Specialization"])
        self.assertEqual([o.name for o in result.opportunities], ["Kaggle Competitions"])
        self.assertEqual([s.uri for s in result.sources], ["https://example.com/ds-skills"])

        discover_body, structure_body = fake.bodies
        self.assertIn("tools", discover_body)
        self.assertNotIn("generationConfig", discover_body)
        self.assertIn(NOTES, structure_body["contents"][0]["parts"][0]["text"])
        self.assertIn("courses", structure_body["generationConfig"]["responseSchema"]["properties"])

    async def test_discovery_failure_serves_catalog_without_structuring(self):
        fake = ScriptedGemini([unavailable()])
        result = await discover_learning_resources("Data Scientist", "SQL", client=fake.client())

        self.assertEqual(result, static_learning_catalog())
        self.assertEqual(len(fake.requests), 1)

    async def test_numeric_optional_fields_are_kept_as_text(self):
        payload = {"courses": [{"title": "Intro to SQL", "provider": "Khan Academy",
                                "link": "https://www.khanacademy.org/computing/computer-programming/sql",
                                "cost": 0, "duration": 12.5}],
                   "opportunities": [{"name": "Kaggle Competitions", "link": "https://www.kaggle.com/competitions",
                                      "difficulty": 3}]}
        fake = ScriptedGemini([envelope(NOTES), json_envelope(payload)])
        result = await discover_learning_resources("Data Analyst", ["SQL"], client=fake.client())

        self.assertFalse(result.fallback)
        self.assertEqual((result.courses[0].cost, result.courses[0].duration), ("0", "12.5"))
        self.assertEqual(result.opportunities[0].difficulty, "3")

    async def test_structure_failures_serve_catalog(self):
        for reply in (envelope("definitely not json"), json_envelope({"courses": []}),
                      json_envelope({"courses": [{"title": "no link"}], "opportunities": []})):
            with self.subTest(reply=reply):
                fake = ScriptedGemini([envelope(NOTES), reply])
                result = await discover_learning_resources("Data Scientist", [], client=fake.client())
                self.assertTrue(result.fallback)
                self.assertEqual(result.sources, [])

    async def test_missing_key_serves_catalog(self):
        client = GeminiClient(api_key="", transport=httpx.MockTransport(ScriptedGemini([])))
        result = await discover_learning_resources("Data Scientist", [], client=client)
        self.assertTrue(result.fallback)

    async def test_missing_role_is_not_masked_by_fallback(self):
        with self.assertRaises(InvalidInputError):
            await discover_learning_resources("", ["SQL"], client=ScriptedGemini([]).client())
