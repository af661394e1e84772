"""Interrupt controller entries of the MADT: the multiprocessor wakeup structure."""