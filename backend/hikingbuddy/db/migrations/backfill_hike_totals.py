"""
Migration to bring stored rows in line with the derived-field rules.

- money_spent on every entry is recomputed from its expenses list.
- on_trail_budget is copied from the legacy budget column where it is null.

Safe to run repeatedly.
"""
from hikingbuddy.db.session import SessionLocal
from hikingbuddy.models.hike import Hike
from hikingbuddy.models.hike_entry import HikeEntry
from hikingbuddy.services.entry_service import calculate_money_spent


def migrate():
    """Recompute entry totals and backfill on-trail budgets."""
    db = SessionLocal()
    try:
        fixed_entries = 0
        for entry in db.query(HikeEntry).all():
            money_spent = calculate_money_spent(entry.expenses)
            if entry.money_spent != money_spent:
                entry.money_spent = money_spent
                fixed_entries += 1
        print(f"Recomputed money_spent for {fixed_entries} entries")
        
        fixed_hikes = 0
        for hike in db.query(Hike).filter(Hike.on_trail_budget.is_(None)).all():
            hike.on_trail_budget = hike.budget
            fixed_hikes += 1
        print(f"Backfilled on_trail_budget for {fixed_hikes} hikes")
        
        db.commit()
        print("Migration completed successfully!")
    except Exception as e:
        db.rollback()
        print(f"Migration failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    migrate()
