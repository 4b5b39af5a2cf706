"""Style hashtags, mentions and links in a few lines — zero config, zero deps."""

from socialspan import SocialView, SpannableText

host = SpannableText("check @bob and #news http://x.io")
view = SocialView(host)

for span in host.spans:
    print(host.text[span.start : span.end], span.annotation)
