"""Suggest accounts while a mention is being typed, then click the result."""

from socialspan import Mention, PatternKind, SocialView, SpannableText, suggest

people = [Mention("bob"), Mention("bobby", display_name="Bobby Tables"), Mention("carol")]

host = SpannableText("ping ")
view = SocialView(host)
view.set_live_typing_watcher(
    PatternKind.MENTION,
    lambda v, partial: print(f"@{partial}: {[str(m) for m in suggest(people, partial)]}"),
)
view.set_click_listener(PatternKind.MENTION, lambda v, name: print(f"open profile {name}"))

for char in "@bobb":
    host.insert(len(host.text), char)

view.click_at(len("ping "))
