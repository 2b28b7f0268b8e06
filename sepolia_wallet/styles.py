"""CSS styles for the Sepolia Quick Wallet application."""

CSS = """
Screen {
    background: #1e1e2e;
}

Header {
    background: #181825;
    text-style: bold;
    padding: 0 1;
    height: 3;
}

#connection-status {
    background: #181825;
    color: #a6adc8;
    padding: 0 2;
    height: 1;
    text-align: right;
    dock: top;
}

Footer {
    background: #181825;
    height: 2;
}

Button {
    margin: 0 1 1 0;
    min-width: 12;
    background: #313244;
    color: #cdd6f4;
    border: tall #45475a;
}

Button:hover {
    background: #45475a;
    border: tall #89b4fa;
}

Button:focus {
    border: tall #89b4fa;
    text-style: bold;
}

Horizontal {
    height: auto;
}

Horizontal > * {
    width: auto;
}

Label {
    margin: 1 0 0 0;
    color: #a6adc8;
}

Input {
    background: #181825;
    border: tall #45475a;
    color: #cdd6f4;
    margin: 0 0 1 0;
}

Input:focus {
    border: tall #89b4fa;
}

Static {
    color: #cdd6f4;
}

#setup-section, #wallet-section {
    padding: 1 2;
    height: auto;
}

#wallet-title, #setup-title, #send-title {
    text-style: bold;
    color: #89b4fa;
    margin: 1 0;
}

#security-warning {
    background: #45243a;
    color: #f9e2af;
    padding: 0 1;
    margin: 0 0 1 0;
}

#address-value, #private-key-value {
    background: #181825;
    border: solid #3b82f6;
    padding: 0 1;
    margin: 0 0 1 0;
}

#balance-value {
    text-style: bold;
    color: #a6e3a1;
    padding: 0 1;
    margin: 0 0 1 0;
}

#faucet-links {
    color: #a6adc8;
    padding: 0 1;
    margin: 1 0;
}

.hidden {
    display: none;
}

ModalScreen {
    align: center middle;
}

ModalScreen > Vertical {
    border: solid #22d3ee;
    border-title-style: bold;
    background: #181825;
    padding: 1 2;
    width: 64;
    height: auto;
}

#confirm-title {
    text-style: bold;
    color: #f9e2af;
}
"""
