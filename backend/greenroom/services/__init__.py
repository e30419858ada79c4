"""
Service layer.
- attachments: named file attachments on records (avatar, presentation)
- room_settings: meeting option retrieval with provider configuration applied
- rooms: multi-table room lifecycle (create with defaults, cascading destroy)
"""
