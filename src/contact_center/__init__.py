"""Contact Center - gateway cliente da API do servidor do Contact Center.

Subpastas:
- bootstrap/: composition root (factories, wiring de settings e sessão)
- services/: ApiClient (uma coroutine por operação) e adaptador de callbacks
- infra/http/: encoder de parâmetros, builder de requisição, decoder de resposta
- domain/: tipos de resultado (NexmoUser, QueuedConversation, WhisperInfo)
- protocols/: contratos (JsonDecodable, sessão HTTP)
- observability/: correlation_id por chamada

Padrão: services orquestra; infra faz IO e parsing; domain valida.
"""
