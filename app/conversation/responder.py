from typing import Any, Dict, List

from .acts import classify_act, ACT_STRESS, ACT_SADNESS

BREATHING_REPLY = "ขอบคุณที่แชร์นะคะ ลองหายใจช้า ๆ ลึก ๆ สัก 3–5 รอบ แล้วบอกฉันได้ไหมว่าอะไรทำให้รู้สึกกังวลที่สุด?"
EMPATHY_REPLY = "ฉันรับฟังอยู่นะคะ ความรู้สึกเศร้านี้เกิดขึ้นมานานแค่ไหนแล้ว? หากรุนแรงมาก ควรปรึกษาผู้เชี่ยวชาญด้วยนะคะ"
LISTENING_REPLY = "ฉันอยู่ตรงนี้เพื่อรับฟังค่ะ เล่าให้ฉันฟังเพิ่มได้เลยว่ากำลังเผชิญอะไรอยู่ในตอนนี้"

REPLIES = {
    ACT_STRESS: BREATHING_REPLY,
    ACT_SADNESS: EMPATHY_REPLY,
}

def build_local_reply(messages: List[Dict[str, Any]]) -> str:
    # only the latest message is looked at
    last = (messages[-1].get("content") if messages else None) or ""
    act = classify_act(last)
    return REPLIES.get(act.act, LISTENING_REPLY)
