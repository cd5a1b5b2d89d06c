from __future__ import annotations

import random
from dataclasses import replace

import pytest

from content import DEFAULT_CATALOG
from content.catalog import ContentCatalog
from content.endings import MENTAL_DEPLETED_MESSAGE
from content.events import EVENTS
from content.types import ShopItem
from game import dispatch, new_game_state
from game import errors
from game import intents as i
from game.state import GameState, StepContext
from ledger.config import SOCIAL_BOUNDS, STAT_BOUNDS
from ledger.types import PlayerStats

from conftest import ScriptedRandom, make_main_game_state


def run(state: GameState, intent, rng=None):
    return dispatch(state, intent, rng=rng or random.Random(0))


# ---------------------------------------------------------------------------
# Setup flow
# ---------------------------------------------------------------------------

def test_new_game_to_main_game(rng):
    state = new_game_state()
    assert state.phase == "start"

    res = dispatch(state, i.StartGame(background="小镇做题家"), rng=rng)
    assert res.accepted
    s = res.state
    assert s.phase == "gaokao"
    assert s.stats.english == 20.0
    assert s.base_mastery_efficiency == 1.4
    assert 500 <= s.gaokao_score <= 729

    s = dispatch(s, i.ProceedToUniversitySelection(), rng=rng).state
    assert s.phase == "university_selection"

    s = replace(s, gaokao_score=750)
    res = dispatch(s, i.SelectUniversity(name="清华大学"), rng=rng)
    assert res.accepted
    assert res.state.university == "清华大学"
    assert res.state.phase == "university_selection"

    res = dispatch(res.state, i.SelectMajor(name="计算机科学与技术"), rng=rng)
    s = res.state
    assert s.phase == "course_selection"
    assert s.semester == 1
    assert s.major_type == "cs"
    assert {c.id for c in s.courses} >= {"cs1-1", "cs1-2"}
    assert len(s.potential_mentors) == 3

    s = dispatch(s, i.ToggleCourse(course_id="gen1-1"), rng=rng).state
    assert "gen1-1" in {c.id for c in s.courses}
    locked = dispatch(s, i.ToggleCourse(course_id="cs1-1"), rng=rng)
    assert locked.rejection == errors.INVALID_CHOICE

    s = dispatch(s, i.ConfirmCourses(), rng=rng).state
    assert s.phase == "main_game"


def test_unknown_background_is_rejected(rng):
    res = dispatch(new_game_state(), i.StartGame(background="外星人"), rng=rng)
    assert res.rejection == errors.NOT_FOUND
    assert res.state.phase == "start"


def test_out_of_range_university_is_rejected(rng):
    state = replace(new_game_state(), phase="university_selection", gaokao_score=520)
    res = dispatch(state, i.SelectUniversity(name="清华大学"), rng=rng)
    assert res.rejection == errors.INVALID_CHOICE


def test_failed_reach_goes_to_university_failed():
    state = replace(new_game_state(), phase="university_selection", gaokao_score=690)
    res = dispatch(state, i.SelectUniversity(name="清华大学"), rng=ScriptedRandom([0.9, 0.5]))
    s = res.state
    assert s.phase == "university_failed"
    assert s.failed_university == "清华大学"
    assert s.rejection_count == 1
    assert s.stats.mental == 60.0
    assert s.gaokao_score == 615
    assert s.university == ""

    back = dispatch(s, i.ProceedToUniversitySelection(), rng=random.Random(0))
    assert back.state.phase == "university_selection"


def test_wrong_phase_intents_are_rejected(rng):
    state = new_game_state()
    for intent in (i.AdvanceWeek(), i.ConfirmCourses(), i.SubmitApplication(university="清华大学")):
        res = dispatch(state, intent, rng=rng)
        assert res.rejection == errors.WRONG_PHASE
        assert res.state == state


# ---------------------------------------------------------------------------
# Weekly loop
# ---------------------------------------------------------------------------

def test_action_selection_cap(main_state, rng):
    s = main_state
    for name in ("上课", "英语学习", "休息"):
        s = dispatch(s, i.ToggleAction(name=name), rng=rng).state
    res = dispatch(s, i.ToggleAction(name="社交"), rng=rng)
    assert res.rejection == errors.SELECTION_LIMIT_EXCEEDED
    assert res.state.selected_actions == ("上课", "英语学习", "休息")
    assert dispatch(s, i.ToggleAction(name="不存在"), rng=rng).rejection == errors.NOT_FOUND


def test_research_drop_week_with_no_actions(main_state, rng):
    state = replace(main_state, stats=replace(main_state.stats, research=100.0))
    res = dispatch(state, i.AdvanceWeek(), rng=rng)
    s = res.state
    assert res.accepted
    assert s.stats.research == 0.0
    assert [r.kind for r in s.resume] == ["research"]
    assert s.money == 700
    assert s.week == 3
    assert res.logs[0] == "第 2 周结算完成。"


def test_unaffordable_batch_changes_nothing(main_state, rng):
    state = replace(main_state, stats=replace(main_state.stats, stamina=30.0))
    state = dispatch(state, i.ToggleAction(name="刷绩点神器"), rng=rng).state
    res = dispatch(state, i.AdvanceWeek(), rng=rng)
    assert res.rejection == errors.INSUFFICIENT_RESOURCE
    assert res.state.stats == state.stats
    assert res.state.week == state.week
    assert res.state.selected_actions == ("刷绩点神器",)


def test_week_end_resets_selection_and_boosts(main_state, rng):
    s = dispatch(main_state, i.PurchaseItem(name="AI助手"), rng=rng).state
    assert s.efficiencies.research == pytest.approx(1.5)
    s = dispatch(s, i.ToggleAction(name="上课"), rng=rng).state
    s = replace(s, current_event=None)
    res = dispatch(s, i.AdvanceWeek(), rng=rng)
    out = res.state
    assert out.selected_actions == ()
    assert out.purchase_counts == {}
    assert out.efficiencies.mastery == pytest.approx(1.4)
    assert out.efficiencies.research == pytest.approx(1.0)
    assert out.week_summary.gains.get("mastery", 0) > 0


def test_midterm_runs_on_week_nine(main_state, rng):
    state = replace(main_state, week=8)
    res = dispatch(state, i.AdvanceWeek(), rng=rng)
    report = res.state.exam_report
    assert report is not None and report.kind == "midterm"
    assert res.state.stats.gpa == main_state.stats.gpa
    # No event is drawn on an exam week.
    assert res.state.current_event is None


def test_final_exam_and_rollover(main_state, rng):
    state = replace(main_state, week=17)
    s = dispatch(state, i.AdvanceWeek(), rng=rng).state
    assert s.exam_report is not None and s.exam_report.kind == "final"
    assert s.stats.gpa == round(s.exam_report.new_gpa, 2)
    assert s.week == 18
    s = replace(s, current_event=None)

    s = dispatch(s, i.AdvanceWeek(), rng=rng).state
    assert s.semester == 2
    assert s.week == 1
    assert s.phase == "course_selection"
    assert all(c.semester == 2 and c.mastery == 0.0 for c in s.courses)


def test_rollover_into_summer_camp(main_state, rng):
    state = replace(main_state, semester=5, week=18, courses=())
    s = dispatch(state, i.AdvanceWeek(), rng=rng).state
    assert s.semester == 6
    assert s.phase == "summer_camp"


def test_stamina_depletion_ends_game(main_state, rng):
    state = replace(main_state, stats=replace(main_state.stats, stamina=40.0))
    state = dispatch(state, i.ToggleAction(name="刷绩点神器"), rng=rng).state
    res = dispatch(state, i.AdvanceWeek(), rng=rng)
    s = res.state
    assert s.is_game_over
    assert s.phase == "game_over"
    assert s.ending is not None
    assert "体力" in s.game_message


def test_mental_depletion_ends_game(main_state, rng):
    state = replace(main_state, stats=replace(main_state.stats, mental=40.0))
    state = dispatch(state, i.ToggleAction(name="论文复现"), rng=rng).state
    res = dispatch(state, i.AdvanceWeek(), rng=rng)
    s = res.state
    assert res.accepted
    assert s.stats.mental == 0.0
    assert s.stats.stamina > 0
    assert s.is_game_over
    assert s.phase == "game_over"
    assert s.game_message == MENTAL_DEPLETED_MESSAGE
    assert s.ending is not None


def test_semester_overflow_ends_game(main_state, rng):
    state = replace(main_state, semester=7, week=18, courses=())
    res = dispatch(state, i.AdvanceWeek(), rng=rng)
    s = res.state
    assert res.accepted
    assert s.semester == 8
    assert s.week == 1
    assert s.is_game_over
    assert s.phase == "game_over"
    assert s.current_event is None
    assert s.ending is not None
    assert s.game_message == s.ending.message
    assert dispatch(s, i.AdvanceWeek(), rng=rng).rejection == errors.GAME_OVER


def test_game_over_rejects_everything(main_state, rng):
    over = replace(main_state, is_game_over=True, phase="game_over")
    res = dispatch(over, i.AdvanceWeek(), rng=rng)
    assert res.rejection == errors.GAME_OVER
    assert res.state.week == over.week


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

def test_pending_event_blocks_week_and_resolves(main_state, rng):
    event = next(e for e in EVENTS if e.title == "同窗的竞争与合作")
    state = replace(main_state, current_event=event)
    assert dispatch(state, i.AdvanceWeek(), rng=rng).rejection == errors.EVENT_PENDING
    assert dispatch(state, i.ChooseEventOption(index=5), rng=rng).rejection == errors.INVALID_CHOICE

    res = dispatch(state, i.ChooseEventOption(index=0), rng=rng)
    s = res.state
    assert s.current_event is None
    assert s.stats.mental == 95.0
    assert s.stats.stamina == 90.0
    assert res.logs[0].startswith("事件结果: ")


def test_choose_without_event(main_state, rng):
    assert dispatch(main_state, i.ChooseEventOption(index=0), rng=rng).rejection == errors.NOT_FOUND


# ---------------------------------------------------------------------------
# Shop
# ---------------------------------------------------------------------------

def test_shop_limit_and_funds(main_state, rng):
    s = main_state
    for _ in range(7):
        res = dispatch(s, i.PurchaseItem(name="红牛"), rng=rng)
        assert res.accepted
        s = res.state
    assert s.money == 1000 - 7 * 20
    assert s.purchase_counts["红牛"] == 7
    assert dispatch(s, i.PurchaseItem(name="红牛"), rng=rng).rejection == errors.PURCHASE_LIMIT_EXCEEDED

    poor = replace(main_state, money=10)
    res = dispatch(poor, i.PurchaseItem(name="心理咨询"), rng=rng)
    assert res.rejection == errors.INSUFFICIENT_FUNDS
    assert res.state.money == 10
    assert dispatch(main_state, i.PurchaseItem(name="时光机"), rng=rng).rejection == errors.NOT_FOUND


def test_shop_stat_item_is_clamped(main_state, rng):
    s = dispatch(main_state, i.PurchaseItem(name="心理咨询"), rng=rng).state
    assert s.stats.mental == 100.0
    assert s.money == 800


def test_shop_resume_item(main_state):
    rich = replace(main_state, money=5000)
    res = dispatch(rich, i.PurchaseItem(name="闲鱼卖家"), rng=ScriptedRandom([0.9]))
    s = res.state
    assert s.money == 2000
    assert len(s.resume) == 1
    item = s.resume[0]
    assert item.kind == "research"
    assert item.quality == "common"
    assert 10 <= item.score <= 19


def test_resume_item_without_payload_is_not_charged(main_state):
    empty = ShopItem(name="黑市简历", description="来路不明。", cost=500, kind="RESUME")
    thin = ContentCatalog(shop_items=(empty,))
    res = dispatch(main_state, i.PurchaseItem(name="黑市简历"), rng=random.Random(0), catalog=thin)
    assert res.rejection == errors.INVALID_CHOICE
    assert res.state.money == main_state.money
    assert res.state.resume == ()
    assert res.state.purchase_counts == {}


# ---------------------------------------------------------------------------
# Mentors
# ---------------------------------------------------------------------------

def test_mentor_intents(main_state, rng):
    s = dispatch(main_state, i.RefreshMentors(), rng=rng).state
    assert len(s.potential_mentors) == 3
    target = s.potential_mentors[0]

    s = dispatch(s, i.ContactMentor(mentor_id=target.id), rng=rng).state
    assert s.mentors[0].status == "contacting"

    res = dispatch(s, i.CourtMentor(mentor_id=target.id), rng=rng)
    assert res.accepted
    assert res.state.mentors[0].status in ("fish_pond", "verbal_offer", "hard_offer", "rejected")

    assert dispatch(s, i.DeepenMentor(mentor_id="nope"), rng=rng).rejection == errors.NOT_FOUND

    tired = replace(s, stats=replace(s.stats, stamina=1.0))
    assert dispatch(tired, i.RefreshMentors(), rng=rng).rejection == errors.INSUFFICIENT_RESOURCE


# ---------------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------------

def _pre_rec_state() -> GameState:
    state = make_main_game_state(
        phase="pre_recommendation",
        semester=7,
        stats=PlayerStats(gpa=4.2, research=10.0, competition=10.0, english=90.0, mental=90.0, stamina=100.0),
    )
    return dispatch(state, i.SkipToPreRecommendation(), rng=random.Random(3)).state


def test_open_applications_by_semester(main_state, rng):
    assert dispatch(main_state, i.OpenApplications(), rng=rng).rejection == errors.WRONG_PHASE
    s6 = replace(main_state, semester=6)
    assert dispatch(s6, i.OpenApplications(), rng=rng).state.phase == "summer_camp"
    s7 = replace(main_state, semester=7)
    assert dispatch(s7, i.OpenApplications(), rng=rng).state.phase == "pre_recommendation"


def test_pre_recommendation_offer_ends_game():
    state = _pre_rec_state()
    res = dispatch(state, i.SubmitApplication(university="西南林业大学"), rng=ScriptedRandom([0.0]))
    s = res.state
    assert s.current_interview is not None
    assert s.find_application("西南林业大学", "pre_recommendation").status == "interviewing"

    busy = dispatch(s, i.SubmitApplication(university="清华大学"), rng=random.Random(0))
    assert busy.rejection == errors.WRONG_PHASE

    for _ in range(3):
        s = dispatch(s, i.AnswerInterview(option_index=0), rng=random.Random(0)).state
    assert s.is_game_over
    assert s.ending.kind == "success"
    assert s.ending.university == "西南林业大学"
    assert s.find_application("西南林业大学", "pre_recommendation").status == "accepted"


def test_duplicate_application_is_a_no_op():
    state = _pre_rec_state()
    s = dispatch(state, i.SubmitApplication(university="清华大学"), rng=ScriptedRandom([0.999999])).state
    assert s.find_application("清华大学", "pre_recommendation") is not None
    s = replace(s, current_interview=None)
    dup = dispatch(s, i.SubmitApplication(university="清华大学"), rng=random.Random(0))
    assert dup.rejection == errors.DUPLICATE_APPLICATION
    assert dup.state.applications == s.applications


def test_return_to_main(rng):
    state = _pre_rec_state()
    assert dispatch(state, i.ReturnToMain(), rng=rng).state.phase == "main_game"


def test_invalid_interview_option():
    state = _pre_rec_state()
    s = dispatch(state, i.SubmitApplication(university="西南林业大学"), rng=ScriptedRandom([0.0])).state
    res = dispatch(s, i.AnswerInterview(option_index=9), rng=random.Random(0))
    assert res.rejection == errors.INVALID_CHOICE
    assert res.state.current_interview == s.current_interview


# ---------------------------------------------------------------------------
# Debug skips
# ---------------------------------------------------------------------------

def test_skip_to_summer_camp_grants_items_once(main_state, rng):
    s = dispatch(main_state, i.SkipToSummerCamp(), rng=rng).state
    assert s.phase == "summer_camp"
    assert s.semester == 6
    assert s.stats.gpa >= 3.8
    assert s.stats.english == 85.0
    assert {r.id for r in s.resume} == {"skip-1", "skip-2"}
    again = dispatch(s, i.SkipToSummerCamp(), rng=rng).state
    assert len(again.resume) == 2


@pytest.mark.parametrize("intent", [i.SkipToSummerCamp(), i.SkipToPreRecommendation()])
def test_phase_skips_need_university_and_major(intent, rng):
    state = new_game_state()
    res = dispatch(state, intent, rng=rng)
    assert res.rejection == errors.WRONG_PHASE
    assert res.state.phase == "start"
    assert res.state.resume == ()

    chosen = replace(state, phase="university_selection", university="清华大学")
    assert dispatch(chosen, intent, rng=rng).rejection == errors.WRONG_PHASE


def test_skip_to_game_over(main_state, rng):
    res = dispatch(main_state, i.SkipToGameOver(), rng=rng)
    s = res.state
    assert s.is_game_over
    assert s.semester == 8
    assert s.stats.gpa >= 4.1
    assert s.ending is not None
    assert s.ending.kind != "success"


def test_handlers_never_mutate_input(main_state, rng):
    before = main_state
    dispatch(main_state, i.PurchaseItem(name="红牛"), rng=rng)
    dispatch(main_state, i.AdvanceWeek(), rng=rng)
    assert main_state == before
    assert main_state.money == 1000


def test_step_context_defaults():
    ctx = StepContext(rng=random.Random(0))
    assert ctx.catalog.university_by_name("清华大学") is not None


# ---------------------------------------------------------------------------
# Random play
# ---------------------------------------------------------------------------

def _random_intent(state: GameState, chooser: random.Random):
    catalog = DEFAULT_CATALOG
    options = [
        i.AdvanceWeek(),
        i.AdvanceWeek(),
        i.ToggleAction(name=chooser.choice(catalog.actions_for(state.major_type)).name),
        i.PurchaseItem(name=chooser.choice(catalog.shop_catalog()).name),
        i.ChooseEventOption(index=chooser.randrange(3)),
        i.ConfirmCourses(),
        i.RefreshMentors(),
        i.OpenApplications(),
        i.SubmitApplication(university=chooser.choice(catalog.universities).name),
        i.SubmitApplication(university=state.university),
        i.AnswerInterview(option_index=chooser.randrange(4)),
        i.ReturnToMain(),
    ]
    offered = catalog.courses_for(state.major_type, state.semester)
    if offered:
        options.append(i.ToggleCourse(course_id=chooser.choice(offered).id))
    known = state.potential_mentors + state.mentors
    if known:
        mentor_id = chooser.choice(known).id
        options.extend([
            i.ContactMentor(mentor_id=mentor_id),
            i.CourtMentor(mentor_id=mentor_id),
            i.DeepenMentor(mentor_id=mentor_id),
        ])
    return chooser.choice(options)


def _assert_ledger_bounds(state: GameState):
    for name, (lo, hi) in STAT_BOUNDS.items():
        assert lo <= getattr(state.stats, name) <= hi, name
    for name, (lo, hi) in SOCIAL_BOUNDS.items():
        assert lo <= getattr(state.social, name) <= hi, name


@pytest.mark.parametrize("seed", range(20))
def test_random_play_keeps_state_consistent(seed):
    chooser = random.Random(seed)
    rng = random.Random(seed + 1000)
    s = make_main_game_state()
    best_resume = s.resume_score

    for _ in range(300):
        s = dispatch(s, _random_intent(s, chooser), rng=rng).state
        _assert_ledger_bounds(s)
        assert s.resume_score >= best_resume
        best_resume = s.resume_score
        keys = [(a.university, a.phase) for a in s.applications]
        assert len(keys) == len(set(keys))
        if s.is_game_over:
            break
