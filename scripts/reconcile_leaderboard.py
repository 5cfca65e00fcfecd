"""
Reconciliation script: rebuild user totals and leaderboard rows.

This script:
1. Recomputes every user's total_points / total_emissions from daily_logs
2. Rewrites each user's leaderboard row from the profile
3. Deletes leaderboard rows whose user no longer exists

SAFE to run multiple times. Use it after a partially applied write or any
manual edit of daily_logs.
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from app.db.session import SessionLocal  # noqa: E402
from app.footprint.service import reconcile_all  # noqa: E402


def main() -> int:
    db = SessionLocal()
    try:
        corrected = reconcile_all(db)
        print("✅ Leaderboard reconciliation complete")
        print(f"   Corrected records: {corrected}")
        return 0
    except Exception as e:
        print("❌ Error while reconciling leaderboard")
        print(str(e))
        raise
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
