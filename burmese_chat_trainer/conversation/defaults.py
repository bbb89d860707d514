"""
Built-in conversation rows, used when no conversation table is loaded.
"""

from typing import Tuple

from ..models import ConversationRow, RowTag


DEFAULT_CONVERSATION_ROWS: Tuple[ConversationRow, ...] = (
    ConversationRow(1, RowTag.TITLE, '-', 'Greeting 1'),
    ConversationRow(2, RowTag.DESCRIPTION, '-', 'Normal greeting to a friend'),
    ConversationRow(3, RowTag.BOT, 'မင်္ဂလာပါ', 'Hello!'),
    ConversationRow(4, RowTag.USER, 'မင်္ဂလာပါ', 'Hello!'),
    ConversationRow(5, RowTag.BOT, 'နေကောင်းလား။', 'How are you?'),
    ConversationRow(6, RowTag.USER, 'ကောင်းပါတယ်။', "I'm fine."),
    ConversationRow(7, RowTag.BOT, 'ဝမ်းသာပါတယ်။', "I'm glad."),
    ConversationRow(8, RowTag.END, '---------', '---------'),
    ConversationRow(9, RowTag.TITLE, '', 'Offering tea'),
    ConversationRow(10, RowTag.DESCRIPTION, '', 'Offering tea to a guest'),
    ConversationRow(11, RowTag.BOT, 'မင်္ဂလာပါ', 'Hello!'),
    ConversationRow(12, RowTag.USER, 'လက်ဖက်ရည်သောက်ချင်လား။', 'Would you like some tea?'),
    ConversationRow(13, RowTag.BOT, 'အခုတင်ဖက်ရည်ပြင်တယ်။', 'I just made some.'),
    ConversationRow(14, RowTag.USER, 'သောက်ပါ။', 'Please have some.'),
    ConversationRow(15, RowTag.BOT, 'သကြားထည့်မလား။', 'Do you take sugar?'),
    ConversationRow(16, RowTag.USER, 'နို့လည်းထည့်မလား။', 'Or milk?'),
    ConversationRow(17, RowTag.BOT, 'ဒီမှာပါ။', 'Here you go.'),
    ConversationRow(18, RowTag.USER, 'သင်ကြိုက်မယ်လို့မျှော်လင့်ပါတယ်။', 'I hope you like it.'),
    ConversationRow(19, RowTag.END, '---------', '---------'),
)
