"""
Run migration to recompute entry totals and backfill on-trail budgets.
"""
import sys
import os

# Add the backend directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from hikingbuddy.db.migrations.backfill_hike_totals import migrate

if __name__ == "__main__":
    migrate()
