from dataclasses import dataclass

ACT_STRESS="STRESS_ANXIETY"
ACT_SADNESS="SADNESS_HOPELESSNESS"
ACT_OTHER="OTHER"

# Checked in order; the first group with a keyword present wins.
KEYWORD_RULES = [
    (ACT_STRESS, ("เครียด", "กังวล")),        # stressed, worried
    (ACT_SADNESS, ("เศร้า", "หมดหวัง")),      # sad, hopeless
]

@dataclass
class ActResult:
    act: str
    signals: dict

def classify_act(user_text: str) -> ActResult:
    t = user_text or ""
    for act, keywords in KEYWORD_RULES:
        for kw in keywords:
            if kw in t:
                return ActResult(act, {"matched": kw})
    return ActResult(ACT_OTHER, {})
