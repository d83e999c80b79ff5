# File: content.py
"""Static content pools for Thunderpick Move.

Daily power moves, power poses, battle questions and the activity templates
used to seed and extend the activity catalog. This is static content, not user
data: pools are never persisted and never mutated at runtime. Order matters,
since the daily selection indexes into these tuples by day-of-year.
"""

from __future__ import annotations

from typing import Final

from . import const
from .type_defs import BattleQuestion, PowerMove, PowerPose

# ==============================================================================
# Daily Power Moves
# ==============================================================================

DAILY_POWER_MOVES: Final[tuple[PowerMove, ...]] = (
    PowerMove(
        id=1,
        title="Superhero Stance",
        description=(
            "Stand with legs shoulder-width apart, hands on hips, chest out. "
            "Hold for 2 minutes to boost testosterone and lower cortisol."
        ),
        image_name="power_pose_superhero",
    ),
    PowerMove(
        id=2,
        title="Magnetic Gaze",
        description=(
            "Practice soft but focused eye contact in the mirror. "
            "Don't blink excessively. Project warmth."
        ),
        image_name="magnetic_gaze_practice",
    ),
    PowerMove(
        id=3,
        title="The Steeple",
        description=(
            "Place fingertips together like a steeple. Use this when listening "
            "to show confidence and intellect."
        ),
        image_name="steeppling_hands",
    ),
    PowerMove(
        id=4,
        title="Open Palms",
        description=(
            "When speaking, keep palms open and visible. "
            "It signals honesty and trustworthiness."
        ),
        image_name="open_palms_gesture",
    ),
    PowerMove(
        id=5,
        title="Chin Lift",
        description=(
            "Keep your chin parallel to the floor, not tucked down. "
            "Shows engagement and lack of fear."
        ),
        image_name="chin_lift",
    ),
    PowerMove(
        id=6,
        title="Slow Nod",
        description=(
            "Nod slowly while listening. Fast nodding signals impatience; slow "
            "nodding signals 'I hear you and I am processing'."
        ),
        image_name="slow_nod",
    ),
    PowerMove(
        id=7,
        title="Shoulder Roll",
        description=(
            "Roll shoulders up and back to reset posture. "
            "Keeps chest open and prevents slouching."
        ),
        image_name="shoulder_roll_back",
    ),
    PowerMove(
        id=8,
        title="Mirroring",
        description=(
            "Subtly mimic the posture of someone you are talking to. "
            "Builds unconscious rapport."
        ),
        image_name="mirroring_intro",
    ),
    PowerMove(
        id=9,
        title="Space Claimer",
        description=(
            "Spread your items or arms slightly wider on the table/chair. "
            "Occupy your space; don't shrink."
        ),
        image_name="space_claimer",
    ),
    PowerMove(
        id=10,
        title="Firm Handshake",
        description=(
            "Visualize the web of your hand meeting the web of theirs. "
            "Firm but not crushing."
        ),
        image_name="firm_handshake_setup",
    ),
    PowerMove(
        id=11,
        title="Lean In",
        description=(
            "Lean slightly forward when someone shares something important. "
            "Shows active listening."
        ),
        image_name="lean_in_interest",
    ),
    PowerMove(
        id=12,
        title="Lean Back",
        description=(
            "Lean back and relax in your chair during a negotiation. "
            "Signals you are comfortable and not desperate."
        ),
        image_name="lean_back_power",
    ),
    PowerMove(
        id=13,
        title="The Pause",
        description=(
            "Take a breath and pause for 2 seconds before answering a question. "
            "Shows control."
        ),
        image_name="pause_before_speaking",
    ),
    PowerMove(
        id=14,
        title="Controlled Smile",
        description=(
            "A slow, genuine smile separates you from nervous, quick smiling."
        ),
        image_name="controlled_smile",
    ),
    PowerMove(
        id=15,
        title="Purposeful Stride",
        description=(
            "Take slightly longer strides than usual. "
            "Signals purpose and direction."
        ),
        image_name="walking_stride_length",
    ),
)

# ==============================================================================
# Power Poses
# ==============================================================================

POWER_POSES: Final[tuple[PowerPose, ...]] = (
    PowerPose(
        title="The Champion",
        description=(
            "Stand tall, arms raised in a V shape, chin slightly up. "
            "Feel the victory."
        ),
        image_name="pose_champion",
    ),
    PowerPose(
        title="The CEO",
        description=(
            "Lean back slightly in your chair, hands clasped behind your head, "
            "elbows wide."
        ),
        image_name="pose_ceo",
    ),
    PowerPose(
        title="The Wonder",
        description=(
            "Stand with feet wide apart, hands firmly on hips, chest open and proud."
        ),
        image_name="pose_wonder",
    ),
    PowerPose(
        title="The Loomer",
        description=(
            "Stand leaning forward slightly, hands planted firmly on a desk or "
            "table in front of you."
        ),
        image_name="pose_loomer",
    ),
    PowerPose(
        title="The Steeple",
        description=(
            "Sit or stand, hands joined at the fingertips forming a steeple, "
            "elbows resting or relaxed."
        ),
        image_name="pose_steeple",
    ),
    PowerPose(
        title="The Expander",
        description=(
            "Sit with legs stretched out to the front, arms draped over the back "
            "of adjacent chairs."
        ),
        image_name="pose_expander",
    ),
    PowerPose(
        title="The Percher",
        description=(
            "Sit confidently on the edge of a desk or table, arms relaxed but open."
        ),
        image_name="pose_percher",
    ),
    PowerPose(
        title="The Star",
        description=(
            "Stand with legs wide, arms stretched out to the sides. "
            "Take up as much space as possible."
        ),
        image_name="pose_star",
    ),
    PowerPose(
        title="The Pillar",
        description=(
            "Stand perfectly straight, shoulders back, arms relaxed at sides, "
            "breathing deeply."
        ),
        image_name="pose_pillar",
    ),
    PowerPose(
        title="The Anchor",
        description=(
            "Stand with feet shoulder-width apart, hands clasped loosely behind "
            "your back."
        ),
        image_name="pose_anchor",
    ),
)

# ==============================================================================
# Battle Questions
# ==============================================================================


def _question(
    scenario: str, description: str, options: list[str], correct_answer: str
) -> BattleQuestion:
    return BattleQuestion(
        scenario=scenario,
        description=description,
        options=options,
        correct_answer=correct_answer,
    )


BATTLE_QUESTIONS: Final[tuple[BattleQuestion, ...]] = (
    # Set 1
    _question(
        "Negotiation",
        "Your opponent crosses their arms and leans back. What does it mean?",
        [
            "Defensiveness / Closed off",
            "Relaxation / Comfort",
            "High interest",
            "Dominance",
        ],
        "Defensiveness / Closed off",
    ),
    _question(
        "First Impression",
        "A person you just met gives a quick, one-second eyebrow raise.",
        ["Surprise / Fear", "Anger", "Acknowledgement / Recognition", "Confusion"],
        "Acknowledgement / Recognition",
    ),
    _question(
        "Sales Meeting",
        "The prospect starts tapping their fingers or foot repeatedly.",
        ["Deep thought", "Impatience / Boredom", "Agreement", "Excitement"],
        "Impatience / Boredom",
    ),
    _question(
        "Interview",
        "The interviewer mirrors your posture and gestures.",
        ["Mockery", "Rapport and Agreement", "Hostility", "Boredom"],
        "Rapport and Agreement",
    ),
    _question(
        "Dating",
        "Your date touches their neck or collarbone frequently.",
        ["Relaxation", "Nervousness or Pacifying", "Excitement", "Anger"],
        "Nervousness or Pacifying",
    ),
    _question(
        "Networking",
        "Someone stands with their hands on their hips, thumbs pointing forward.",
        ["Submission", "Inquisitiveness", "Dominance or Readiness", "Fatigue"],
        "Dominance or Readiness",
    ),
    _question(
        "Presentation",
        "The audience member tilts their head, exposing their neck.",
        ["Disagreement", "Boredom", "Interest and Engagement", "Hostility"],
        "Interest and Engagement",
    ),
    _question(
        "Conflict",
        "A coworker rubs their eyes while you're explaining your idea.",
        ["Deceit or Doubt", "Agreement", "Excitement", "Physical exhaustion only"],
        "Deceit or Doubt",
    ),
    _question(
        "Leadership",
        "A manager speaks with their palms facing up.",
        ["Authoritative command", "Submission or Honesty", "Aggression", "Deception"],
        "Submission or Honesty",
    ),
    _question(
        "Public Speaking",
        "The speaker hides their hands in their pockets or behind their back.",
        [
            "High confidence",
            "Relaxation",
            "Hidden agenda or Nervousness",
            "Aggression",
        ],
        "Hidden agenda or Nervousness",
    ),
    # Set 2
    _question(
        "Negotiation",
        "The client suddenly steeples their fingers (fingertips touching, palms apart).",
        ["Confusion", "High confidence / Superiority", "Nervousness", "Boredom"],
        "High confidence / Superiority",
    ),
    _question(
        "First Impression",
        "A handshake where their palm is facing downward.",
        [
            "Equality",
            "Submissiveness",
            "Dominance attempting control",
            "Nervousness",
        ],
        "Dominance attempting control",
    ),
    _question(
        "Sales Meeting",
        "The prospect rubs the back of their neck.",
        [
            "Frustration or Negative emotion",
            "Deep agreement",
            "Excitement",
            "Relaxation",
        ],
        "Frustration or Negative emotion",
    ),
    _question(
        "Interview",
        "The candidate frequently touches their nose while answering a question.",
        ["Honesty", "Potential deceit or Anxiety", "Confidence", "Boredom"],
        "Potential deceit or Anxiety",
    ),
    _question(
        "Dating",
        "Your date maintains prolonged, unblinking eye contact.",
        ["Warmth", "Aggression or Intense interest", "Boredom", "Confusion"],
        "Aggression or Intense interest",
    ),
    _question(
        "Networking",
        "A person's feet are pointed towards the door while talking to you.",
        [
            "Deep engagement",
            "Desire to leave the conversation",
            "Aggression",
            "Relaxation",
        ],
        "Desire to leave the conversation",
    ),
    _question(
        "Presentation",
        "An audience member rests their chin on their thumb, index finger pointing up.",
        ["Boredom", "Critical evaluation", "Absolute agreement", "Confusion"],
        "Critical evaluation",
    ),
    _question(
        "Conflict",
        "A coworker physically steps back after you make a statement.",
        ["Agreement", "Disagreement or Shock", "Excitement", "Relaxation"],
        "Disagreement or Shock",
    ),
    _question(
        "Leadership",
        "A CEO stands taking up maximum space, legs wide, chest out.",
        ["Nervousness", "Submission", "Alpha/Power posing", "Fatigue"],
        "Alpha/Power posing",
    ),
    _question(
        "Public Speaking",
        "The speaker grips the podium edges so tightly their knuckles are white.",
        [
            "Passion",
            "Confidence",
            "Extreme anxiety or suppressed anger",
            "Relaxation",
        ],
        "Extreme anxiety or suppressed anger",
    ),
    # Set 3
    _question(
        "Negotiation",
        "The opponent suddenly uncrosses their arms and leans forward.",
        [
            "Increasing defensiveness",
            "Shift to agreement/interest",
            "Boredom",
            "Hostility",
        ],
        "Shift to agreement/interest",
    ),
    _question(
        "First Impression",
        "A person smiles, but only their mouth moves, not their eyes.",
        ["Genuine happiness", "Fake or polite 'Pan Am' smile", "Surprise", "Fear"],
        "Fake or polite 'Pan Am' smile",
    ),
)

# ==============================================================================
# Activity Templates
# ==============================================================================

# Catalog written to storage the first time the integration loads (or whenever
# the stored catalog is empty).
SEED_ACTIVITIES: Final[tuple[dict[str, object], ...]] = (
    {
        const.DATA_ACTIVITY_TYPE: const.ACTIVITY_TYPE_QUEST,
        const.DATA_ACTIVITY_TITLE: "Mirror Check",
        const.DATA_ACTIVITY_DESCRIPTION: (
            "Stand in front of a mirror and hold a power pose for 2 minutes."
        ),
        const.DATA_ACTIVITY_DIFFICULTY: 1,
        const.DATA_ACTIVITY_XP_REWARD: 10,
    },
    {
        const.DATA_ACTIVITY_TYPE: const.ACTIVITY_TYPE_TRAINING,
        const.DATA_ACTIVITY_TITLE: "Magnetic Walk",
        const.DATA_ACTIVITY_DESCRIPTION: (
            "Practice walking with purpose. Shoulders back, head high."
        ),
        const.DATA_ACTIVITY_DIFFICULTY: 2,
        const.DATA_ACTIVITY_XP_REWARD: 20,
    },
    {
        const.DATA_ACTIVITY_TYPE: const.ACTIVITY_TYPE_BATTLE,
        const.DATA_ACTIVITY_TITLE: "Negotiation Face",
        const.DATA_ACTIVITY_DESCRIPTION: (
            "Keep a neutral expression while listening to intense music."
        ),
        const.DATA_ACTIVITY_DIFFICULTY: 3,
        const.DATA_ACTIVITY_XP_REWARD: 30,
    },
)

# Completion records produced by the training games
TRAINING_GAMES: Final[tuple[dict[str, object], ...]] = (
    {
        const.DATA_ACTIVITY_TYPE: const.ACTIVITY_TYPE_TRAINING,
        const.DATA_ACTIVITY_TITLE: "Poker Face",
        const.DATA_ACTIVITY_DESCRIPTION: "Completed 30s session",
        const.DATA_ACTIVITY_DIFFICULTY: 1,
        const.DATA_ACTIVITY_XP_REWARD: 20,
    },
    {
        const.DATA_ACTIVITY_TYPE: const.ACTIVITY_TYPE_TRAINING,
        const.DATA_ACTIVITY_TITLE: "Magnetic Walk",
        const.DATA_ACTIVITY_DESCRIPTION: "Completed 1m pace tracking",
        const.DATA_ACTIVITY_DIFFICULTY: 2,
        const.DATA_ACTIVITY_XP_REWARD: 30,
    },
    {
        const.DATA_ACTIVITY_TYPE: const.ACTIVITY_TYPE_TRAINING,
        const.DATA_ACTIVITY_TITLE: "Power Posing",
        const.DATA_ACTIVITY_DESCRIPTION: "Held pose for 2 mins",
        const.DATA_ACTIVITY_DIFFICULTY: 3,
        const.DATA_ACTIVITY_XP_REWARD: 50,
    },
)
