import logging

from domain import (
    SUSPICIOUS_KEYWORDS,
    TRANSCRIPT_KEYWORDS,
    FixedScorePolicy,
    KeywordRiskClassifier,
    LinearScorePolicy,
    build_text_classifier,
    build_transcript_classifier,
    find_evidence,
)
from domain.risk_classifier import NO_TRANSCRIPT, TRANSCRIPT_ANALYZED

SAMPLE_SCAM = (
    "Urgent: Your account is blocked. Transfer the OTP now or the police will be notified."
)


def test_text_classifier_flags_sample_scam_message() -> None:
    verdict = build_text_classifier().classify(SAMPLE_SCAM)

    assert verdict.label == "FRAUD"
    assert verdict.score == 90
    assert {"urgent", "otp", "police"} <= set(verdict.evidence)
    assert verdict.recommended_action == "BLOCK"
    assert verdict.action is None


def test_text_classifier_evidence_follows_keyword_list_order() -> None:
    verdict = build_text_classifier().classify(SAMPLE_SCAM)

    assert verdict.evidence == ["urgent", "otp", "police"]
    assert verdict.explanation == "Contains urgent, otp, police"


def test_text_classifier_single_match_explanation() -> None:
    verdict = build_text_classifier().classify("You are a WINNER!")

    assert verdict.evidence == ["winner"]
    assert verdict.explanation == "Contains winner"
    assert verdict.score == 90


def test_text_classifier_without_evidence_is_uncertain() -> None:
    verdict = build_text_classifier().classify("Lunch at noon tomorrow?")

    assert verdict.label == "UNCERTAIN"
    assert verdict.score == 0
    assert verdict.evidence == []
    assert verdict.explanation == ""
    assert verdict.recommended_action == "REVIEW"


def test_classifiers_never_fail_on_missing_text() -> None:
    for classifier in (build_text_classifier(), build_transcript_classifier()):
        for text in (None, ""):
            verdict = classifier.classify(text)
            assert verdict.label == "UNCERTAIN"
            assert verdict.score == 0
            assert verdict.evidence == []


def test_classification_is_deterministic() -> None:
    classifier = build_text_classifier()

    assert classifier.classify(SAMPLE_SCAM) == classifier.classify(SAMPLE_SCAM)
    assert classifier.classify(SAMPLE_SCAM).model_dump() == (
        classifier.classify(SAMPLE_SCAM).model_dump()
    )


def test_additional_matches_never_lower_evidence_or_change_fixed_score() -> None:
    classifier = build_text_classifier()
    text = "please verify account details"
    previous = classifier.classify(text)

    for extra in (" winner", " legal action", " click now", " winner again"):
        text += extra
        current = classifier.classify(text)
        assert len(current.evidence) >= len(previous.evidence)
        assert current.score == 90
        previous = current


def test_transcript_classifier_without_hits_scores_zero() -> None:
    verdict = build_transcript_classifier().classify("hello there, nothing unusual here")

    assert verdict.score == 0
    assert verdict.evidence == []
    assert verdict.explanation == TRANSCRIPT_ANALYZED


def test_transcript_classifier_caps_score_at_one_hundred() -> None:
    verdict = build_transcript_classifier().classify("urgent, transfer now, otp required")

    assert verdict.evidence == ["transfer", "otp", "urgent"]
    assert verdict.score == 100
    assert verdict.label == "FRAUD"


def test_transcript_classifier_scales_with_hit_count() -> None:
    classifier = build_transcript_classifier()

    assert classifier.classify("call the police").score == 60
    assert classifier.classify("police say your card is blocked").score == 80


def test_transcript_classifier_explains_empty_transcript() -> None:
    verdict = build_transcript_classifier().classify("")

    assert verdict.explanation == NO_TRANSCRIPT


def test_find_evidence_is_case_insensitive_substring_match() -> None:
    assert find_evidence("CLICK NOW to Verify Account", SUSPICIOUS_KEYWORDS) == [
        "click now",
        "verify account",
    ]
    assert find_evidence("transferred", TRANSCRIPT_KEYWORDS) == ["transfer"]


def test_policies_can_be_combined_with_custom_keywords() -> None:
    fixed = KeywordRiskClassifier(["gift card"], FixedScorePolicy(flagged_score=75))
    linear = KeywordRiskClassifier(["a", "b"], LinearScorePolicy(per_hit=10, floor=5))

    assert fixed.classify("Pay with a Gift Card").score == 75
    assert linear.classify("a b").score == 25


def test_verdict_logs_name_the_classifier_variant(caplog) -> None:
    caplog.set_level(logging.INFO)

    build_text_classifier().classify("you are a winner")
    build_transcript_classifier().classify("send the otp")

    records = [r for r in caplog.records if r.getMessage() == "Content classified"]
    assert [r.classifier for r in records] == ["text", "transcript"]
