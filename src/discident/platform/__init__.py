"""Platform adapters: libdiscid binding and logging."""
