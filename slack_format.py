"""
Slack Block Kit rendering for the chat bot integration.
"""
from game import MAX_GUESSES
from game_logic import ABSENT, EXACT, PRESENT

EMOJI = {
    EXACT: ":large_green_square:",
    PRESENT: ":large_yellow_square:",
    ABSENT: ":white_large_square:",
}


def emoji_row(evaluation) -> str:
    return "".join(EMOJI[code] for code in evaluation)


def status_message(daily_round, user_id) -> str:
    used = daily_round.guesses_used
    if daily_round.solved:
        plural = "es" if used > 1 else ""
        return f":tada: <@{user_id}> solved today's Wordle in {used} guess{plural}!"
    if daily_round.exhausted:
        return (
            f":no_entry: <@{user_id}> used all guesses. Try again tomorrow!\n"
            f"*Solution:* `{daily_round.secret}`"
        )
    return f"Guess submitted. You have used {used}/{MAX_GUESSES} guesses."


def render_round(daily_round, user_id) -> dict:
    blocks = [
        {"type": "section", "text": {"type": "mrkdwn", "text": emoji_row(evaluation)}}
        for evaluation in daily_round.history
    ]
    blocks.append({
        "type": "context",
        "elements": [{"type": "mrkdwn", "text": status_message(daily_round, user_id)}],
    })
    return {"response_type": "in_channel", "blocks": blocks}


def render_exhausted() -> dict:
    return {
        "response_type": "ephemeral",
        "text": f"You've already used all {MAX_GUESSES} guesses for today!",
    }
