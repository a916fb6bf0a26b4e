"""Central enum definitions for the project."""

from enum import StrEnum


class ParseMode(StrEnum):
    """Rich-text dialects understood by the Telegram Bot API.

    The value is written verbatim into ``parse_mode`` style payload fields.
    """

    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


class APIMethod(StrEnum):
    """Telegram Bot API methods, valued by their URL path segment."""

    # Updates and bot info
    GET_UPDATES = "getUpdates"
    SET_WEBHOOK = "setWebhook"
    DELETE_WEBHOOK = "deleteWebhook"
    GET_WEBHOOK_INFO = "getWebhookInfo"
    GET_ME = "getMe"
    LOG_OUT = "logOut"
    CLOSE = "close"

    # Sending messages
    SEND_MESSAGE = "sendMessage"
    FORWARD_MESSAGE = "forwardMessage"
    FORWARD_MESSAGES = "forwardMessages"
    COPY_MESSAGE = "copyMessage"
    COPY_MESSAGES = "copyMessages"
    SEND_PHOTO = "sendPhoto"
    SEND_AUDIO = "sendAudio"
    SEND_DOCUMENT = "sendDocument"
    SEND_VIDEO = "sendVideo"
    SEND_ANIMATION = "sendAnimation"
    SEND_VOICE = "sendVoice"
    SEND_VIDEO_NOTE = "sendVideoNote"
    SEND_PAID_MEDIA = "sendPaidMedia"
    SEND_MEDIA_GROUP = "sendMediaGroup"
    SEND_LOCATION = "sendLocation"
    SEND_VENUE = "sendVenue"
    SEND_CONTACT = "sendContact"
    SEND_POLL = "sendPoll"
    SEND_DICE = "sendDice"
    SEND_CHAT_ACTION = "sendChatAction"
    SET_MESSAGE_REACTION = "setMessageReaction"

    # Files and chats
    GET_USER_PROFILE_PHOTOS = "getUserProfilePhotos"
    GET_FILE = "getFile"
    BAN_CHAT_MEMBER = "banChatMember"
    UNBAN_CHAT_MEMBER = "unbanChatMember"
    RESTRICT_CHAT_MEMBER = "restrictChatMember"
    PROMOTE_CHAT_MEMBER = "promoteChatMember"
    EXPORT_CHAT_INVITE_LINK = "exportChatInviteLink"
    SET_CHAT_TITLE = "setChatTitle"
    SET_CHAT_DESCRIPTION = "setChatDescription"
    PIN_CHAT_MESSAGE = "pinChatMessage"
    UNPIN_CHAT_MESSAGE = "unpinChatMessage"
    UNPIN_ALL_CHAT_MESSAGES = "unpinAllChatMessages"
    LEAVE_CHAT = "leaveChat"
    GET_CHAT = "getChat"
    GET_CHAT_ADMINISTRATORS = "getChatAdministrators"
    GET_CHAT_MEMBER_COUNT = "getChatMemberCount"
    GET_CHAT_MEMBER = "getChatMember"
    ANSWER_CALLBACK_QUERY = "answerCallbackQuery"
    SET_MY_COMMANDS = "setMyCommands"
    DELETE_MY_COMMANDS = "deleteMyCommands"
    GET_MY_COMMANDS = "getMyCommands"

    # Updating messages
    EDIT_MESSAGE_TEXT = "editMessageText"
    EDIT_MESSAGE_CAPTION = "editMessageCaption"
    EDIT_MESSAGE_MEDIA = "editMessageMedia"
    EDIT_MESSAGE_LIVE_LOCATION = "editMessageLiveLocation"
    STOP_MESSAGE_LIVE_LOCATION = "stopMessageLiveLocation"
    EDIT_MESSAGE_REPLY_MARKUP = "editMessageReplyMarkup"
    STOP_POLL = "stopPoll"
    DELETE_MESSAGE = "deleteMessage"
    DELETE_MESSAGES = "deleteMessages"

    # Stickers
    SEND_STICKER = "sendSticker"
    GET_STICKER_SET = "getStickerSet"

    # Inline mode
    ANSWER_INLINE_QUERY = "answerInlineQuery"
    ANSWER_WEB_APP_QUERY = "answerWebAppQuery"

    # Payments and games
    SEND_INVOICE = "sendInvoice"
    CREATE_INVOICE_LINK = "createInvoiceLink"
    ANSWER_SHIPPING_QUERY = "answerShippingQuery"
    ANSWER_PRE_CHECKOUT_QUERY = "answerPreCheckoutQuery"
    SEND_GAME = "sendGame"
    SET_GAME_SCORE = "setGameScore"
    GET_GAME_HIGH_SCORES = "getGameHighScores"
