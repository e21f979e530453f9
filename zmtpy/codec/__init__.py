"""Security mechanism names and command frames of the ZMTP handshake."""