"""Dialogue Evaluation Module

Scripted conversations checked against the expected triage and stage flow.

This module provides:
1. Evaluation cases (utterance sequences with expected categories/stages)
2. A runner that drives a seeded, zero-delay session through each case
3. Reply quality heuristics (warmth, brevity, follow-up question)
"""
import asyncio
import random
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
import logging

from dialogue.classifier import classify
from dialogue.responses import ResponseBank
from models.session import Category, Stage
from services.session_service import ConversationSession

logger = logging.getLogger(__name__)


@dataclass
class EvaluationCase:
    """A scripted conversation and what should happen at each turn."""
    name: str
    utterances: List[str]
    expected_categories: List[Category]
    expected_stages: List[Stage]
    mood_hint: Optional[str] = None


EVAL_CASES = [
    EvaluationCase(
        name="sad_escalates_to_breathing",
        utterances=["I feel so lonely", "I've been crying all day", "yes please"],
        expected_categories=[Category.SAD, Category.SAD, Category.ACCEPTANCE],
        expected_stages=[Stage.LISTENING, Stage.SUGGESTED_BREATHING, Stage.POST_BREATHING],
        mood_hint="sad",
    ),
    EvaluationCase(
        name="severe_distress_grounding",
        utterances=["Everything is falling apart", "not now"],
        expected_categories=[Category.SEVERE_STRESS, Category.DECLINE],
        expected_stages=[Stage.SUGGESTED_BREATHING, Stage.LISTENING],
    ),
    EvaluationCase(
        name="stress_declined_then_closing",
        utterances=["work stress again", "so anxious about the deadline", "maybe later",
                    "thank you, bye"],
        expected_categories=[Category.STRESSED, Category.STRESSED, Category.DECLINE,
                             Category.CLOSING],
        expected_stages=[Stage.LISTENING, Stage.SUGGESTED_BREATHING, Stage.LISTENING,
                         Stage.CLOSING],
        mood_hint="stressed",
    ),
    EvaluationCase(
        name="happy_stays_put",
        utterances=["hello", "I'm feeling happy today"],
        expected_categories=[Category.GREETING, Category.HAPPY],
        expected_stages=[Stage.INITIAL, Stage.INITIAL],
    ),
    EvaluationCase(
        name="asks_for_relaxation",
        utterances=["can we relax for a bit", "I'm sad again"],
        expected_categories=[Category.BREATHING, Category.SAD],
        expected_stages=[Stage.POST_BREATHING, Stage.LISTENING],
    ),
]


@dataclass
class EvaluationResult:
    """Result of evaluating a single case."""
    case_name: str
    passed: bool
    categories_correct: float  # Fraction of turns classified as expected
    stages_correct: float      # Fraction of turns landing in the expected stage
    response_quality: Dict[str, float] = field(default_factory=dict)
    details: str = ""


class DialogueEvaluator:
    """Evaluates the dialogue engine against scripted cases."""

    def __init__(self, seed: int = 7):
        self.seed = seed

    def evaluate_case(self, case: EvaluationCase) -> EvaluationResult:
        """Evaluate a single case on a fresh session."""
        logger.info(f"Evaluating: {case.name}")
        session = ConversationSession(
            mood_hint=case.mood_hint,
            bank=ResponseBank(random.Random(self.seed)),
            thinking_delay=(0.0, 0.0),
        )

        categories, stages, replies = [], [], []
        for utterance in case.utterances:
            categories.append(classify(utterance))
            reply = asyncio.run(session.submit(utterance))
            replies.append(reply.text)
            stages.append(session.stage)

        category_hits = sum(a == e for a, e in zip(categories, case.expected_categories))
        stage_hits = sum(a == e for a, e in zip(stages, case.expected_stages))
        total = len(case.utterances)

        return EvaluationResult(
            case_name=case.name,
            passed=category_hits == total and stage_hits == total,
            categories_correct=category_hits / total,
            stages_correct=stage_hits / total,
            response_quality=self._score_replies(replies),
            details=" → ".join(s.value for s in stages),
        )

    def _score_replies(self, replies: List[str]) -> Dict[str, float]:
        """Score reply quality (simplified heuristics)."""
        if not replies:
            return {}
        text = " ".join(replies).lower()
        scores = {}

        # Warmth - contains validating language
        warm_words = ["here for you", "okay", "glad", "valid", "hear you", "not alone"]
        scores["warmth"] = min(1.0, sum(1 for w in warm_words if w in text) / 2)

        # Engagement - replies invite the user to keep talking
        scores["engagement"] = sum(1 for r in replies if "?" in r) / len(replies)

        # Brevity - each reply fits on a phone screen
        scores["brevity"] = sum(1 for r in replies if len(r.split()) < 80) / len(replies)

        return scores

    def run_all(self) -> Dict[str, Any]:
        """Run all evaluation cases and return summary."""
        results = [self.evaluate_case(case) for case in EVAL_CASES]

        passed = sum(1 for r in results if r.passed)
        total = len(results)

        avg_quality = {}
        for key in ["warmth", "engagement", "brevity"]:
            scores = [r.response_quality.get(key, 0) for r in results if r.response_quality]
            if scores:
                avg_quality[key] = sum(scores) / len(scores)

        return {
            "pass_rate": f"{passed}/{total} ({passed/total:.0%})",
            "results": [
                {
                    "name": r.case_name,
                    "passed": "✅" if r.passed else "❌",
                    "categories": f"{r.categories_correct:.0%}",
                    "stages": f"{r.stages_correct:.0%}",
                    "flow": r.details,
                }
                for r in results
            ],
            "quality_scores": avg_quality
        }


def run_evaluation():
    """Run evaluation and print results."""
    print("\n" + "="*60)
    print("🧪 MINDEASE DIALOGUE EVALUATION")
    print("="*60 + "\n")

    summary = DialogueEvaluator().run_all()

    print(f"Pass Rate: {summary['pass_rate']}\n")

    print("Individual Results:")
    print("-" * 50)
    for r in summary["results"]:
        print(f"  {r['passed']} {r['name']}: categories={r['categories']} stages={r['stages']}")
        print(f"      {r['flow']}")

    print("\nQuality Scores (avg):")
    print("-" * 50)
    for metric, score in summary.get("quality_scores", {}).items():
        bar = "█" * int(score * 10) + "░" * (10 - int(score * 10))
        print(f"  {metric:12} [{bar}] {score:.0%}")

    print("\n" + "="*60)

    return summary


if __name__ == "__main__":
    run_evaluation()
