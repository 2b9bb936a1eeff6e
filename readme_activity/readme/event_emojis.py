"""Line prefixes for the rendered event kinds."""

COMMENT_EMOJI = "🗣"
ISSUE_EMOJI = "❗️"
PR_OPENED_EMOJI = "💪"
PR_CLOSED_EMOJI = "❌"
PR_MERGED_EMOJI = "🎉"
PUSH_EMOJI = "📦"
FORK_EMOJI = "🍴"
STAR_EMOJI = "⭐️"
PUBLIC_EMOJI = "🔓"
CREATE_EMOJI = "✨"
