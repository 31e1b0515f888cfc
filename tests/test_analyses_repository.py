import unittest

from sqlalchemy import inspect

from domain.schemas import AnalysisResult
from infra.db.session import engine, init_db
from infra.repositories.analyses_repository import AnalysesRepository

from gemini_fakes import ANALYSIS_PAYLOAD


def analysis(timestamp: str, score: int) -> AnalysisResult:
    return AnalysisResult(**dict(ANALYSIS_PAYLOAD, resumeScore=score),
                          timestamp=timestamp, careerGoal="Data Scientist")


class AnalysesRepositoryTests(unittest.TestCase):
    def test_latest_orders_by_timestamp(self):
        repo = AnalysesRepository()
        repo.append("user-repo", analysis("2025-03-01T10:00:00.000Z", 60))
        repo.append("user-repo", analysis("2025-05-01T10:00:00.000Z", 80))
        repo.append("user-repo", analysis("2025-04-01T10:00:00.000Z", 70))
        repo.append("someone-else", analysis("2026-01-01T10:00:00.000Z", 10))

        self.assertEqual(repo.latest("user-repo").resumeScore, 80)

    def test_latest_for_unknown_user(self):
        self.assertIsNone(AnalysesRepository().latest("nobody"))


class InitDbTests(unittest.TestCase):
    def test_init_db_is_repeatable_and_keeps_rows(self):
        AnalysesRepository().append("user-init", analysis("2025-06-01T10:00:00.000Z", 55))

        init_db()

        self.assertIn("analyses", inspect(engine).get_table_names())
        self.assertEqual(AnalysesRepository().latest("user-init").resumeScore, 55)
