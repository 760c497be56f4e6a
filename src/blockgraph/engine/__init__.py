"""Engine layer — layout, camera/interaction, rendering, and tooltips.

Pure, synchronous code over domain types. Depends on domain and config
models only; never on services, infrastructure, commands, or output.
"""
