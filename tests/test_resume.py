from __future__ import annotations

import random
from collections import Counter

from content.catalog import ContentCatalog
from ledger.types import PlayerStats
from resume.drops import apply_drops, draw_item, roll_quality
from resume.types import ResumeItem, total_score

from conftest import ScriptedRandom


def test_quality_cutoffs():
    assert roll_quality(ScriptedRandom([0.02])) == "legendary"
    assert roll_quality(ScriptedRandom([0.03])) == "epic"
    assert roll_quality(ScriptedRandom([0.149])) == "epic"
    assert roll_quality(ScriptedRandom([0.15])) == "rare"
    assert roll_quality(ScriptedRandom([0.49])) == "rare"
    assert roll_quality(ScriptedRandom([0.5])) == "common"


def test_quality_distribution_is_roughly_fixed():
    rng = random.Random(42)
    counts = Counter(roll_quality(rng) for _ in range(20000))
    assert abs(counts["legendary"] / 20000 - 0.03) < 0.01
    assert abs(counts["common"] / 20000 - 0.50) < 0.02


def test_research_drop_resets_accumulator(catalog, rng):
    stats = PlayerStats(gpa=0.0, research=100.0, competition=0.0, english=40.0, mental=80.0, stamina=100.0)
    out = apply_drops(stats, (), catalog, rng)
    assert out.stats.research == 0.0
    assert len(out.resume) == 1
    item = out.resume[0]
    assert item.kind == "research"
    assert len(item.id) == 9
    assert item.quality in ("legendary", "epic", "rare", "common")
    assert out.logs and out.logs[0].startswith("🎉")


def test_both_accumulators_fire_in_one_call(catalog, rng):
    stats = PlayerStats(research=100.0, competition=100.0)
    out = apply_drops(stats, (), catalog, rng)
    assert [i.kind for i in out.resume] == ["research", "competition"]
    assert out.stats.research == 0.0 and out.stats.competition == 0.0


def test_below_threshold_keeps_everything(catalog, rng):
    stats = PlayerStats(research=99.9)
    out = apply_drops(stats, (), catalog, rng)
    assert out.stats == stats
    assert out.resume == ()


def test_item_score_within_entry_range(catalog):
    rng = random.Random(5)
    for _ in range(100):
        item = draw_item("competition", catalog, rng)
        pool = catalog.resume_pools["competition"]
        entry = next(e for e in pool if e.name == item.name and e.quality == item.quality)
        assert entry.score_range.low <= item.score <= entry.score_range.high


def test_empty_pool_skips_drop(rng):
    thin = ContentCatalog(resume_pools={})
    out = apply_drops(PlayerStats(research=100.0), (), thin, rng)
    assert out.stats.research == 0.0
    assert out.resume == ()


def test_total_score():
    items = (
        ResumeItem(id="a", kind="research", name="x", score=40, quality="rare"),
        ResumeItem(id="b", kind="competition", name="y", score=15, quality="common"),
    )
    assert total_score(items) == 55
