import os
import sys
import tempfile

# Point storage at a scratch directory before the app modules read settings.
_TMP = tempfile.mkdtemp(prefix="careerlift-tests-")
os.environ["SQLITE_PATH"] = os.path.join(_TMP, "test.sqlite3")
os.environ["UPLOAD_DIR"] = os.path.join(_TMP, "uploads")
os.environ["GEMINI_API_KEY"] = "test-key"
os.environ["RETRY_BASE_DELAY"] = "0"

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from infra.db.session import init_db  # noqa: E402

init_db()
