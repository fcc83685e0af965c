# Role: Process-wide singletons shared by the routers. Tests swap chat_service.reply_generator to stub replies.

from chatbot.core.chat_service import ChatService

chat_service = ChatService()
