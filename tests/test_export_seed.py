"""
CSV export and demo seeding tests.
"""

from intake.export import CSV_HEADER, complaint_to_row, export_csv, render_csv
from intake.seed import SAMPLE_COMPLAINTS, seed_engine


class TestExport:
    def test_row_replaces_commas(self, engine):
        cid = engine.submit("garbage", "Clifton, Block 5", "bins full, smell, flies", 2)
        row = complaint_to_row(engine.search_by_id(cid))
        assert row == (f"{cid},garbage,Clifton; Block 5,bins full; smell; flies,2,"
                       "2026-01-01T08:00:00+00:00,Pending")
        assert len(row.split(",")) == 7

    def test_render_includes_history(self, engine):
        engine.submit("water", "A", "leak", 5)
        engine.submit("garbage", "B", "smell", 2)
        engine.serve_next(True)
        lines = render_csv(engine.all_records()).splitlines()
        assert lines[0] == CSV_HEADER == "id,type,area,description,severity,timestamp,status"
        assert lines[1].endswith(",Processed")
        assert lines[2].endswith(",Pending")

    def test_export_csv_writes_file(self, engine, tmp_path):
        engine.submit("water", "A", "leak", 5)
        path = tmp_path / "out.csv"
        assert export_csv(engine.all_records(), path) == 1
        assert path.read_text(encoding="utf-8").splitlines()[0] == CSV_HEADER

    def test_line_breaks_stay_on_one_row(self, engine):
        cid = engine.submit("water", "Block 13\r\nGulshan", "pipe burst\nstreet flooded", 5)
        lines = render_csv(engine.all_records()).splitlines()
        assert len(lines) == 2
        assert lines[1].startswith(f"{cid},water,Block 13  Gulshan,pipe burst street flooded,5,")


class TestSeed:
    def test_seed_routes_through_intake(self, engine):
        ids = seed_engine(engine)
        assert ids == list(range(1, len(SAMPLE_COMPLAINTS) + 1))
        urgent = sum(1 for c in SAMPLE_COMPLAINTS if c["severity"] >= 4)
        assert len(engine.priority_queue) == urgent
        assert len(engine.fallback_queue) == len(SAMPLE_COMPLAINTS) - urgent

    def test_seed_contains_near_duplicate(self, engine):
        ids = seed_engine(engine)
        existing = engine.check_duplicate("SADDAR", "garbage not collected for a week near empress market")
        assert existing == ids[-1]

    def test_seed_custom_list(self, engine):
        ids = seed_engine(engine, [{"type": "other", "area": "X", "description": "y", "severity": 1}])
        assert ids == [1]
