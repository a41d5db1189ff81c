from django.dispatch import Signal

document_read = Signal()
storage_discovered = Signal()
profile_resolved = Signal()
